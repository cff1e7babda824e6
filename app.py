import os

from src.event_attendance.event_attendance.main import create_app

app = create_app()

if __name__ == '__main__':
    port = int(os.getenv("PORT", "5000"))
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=port, debug=app.config["DEBUG"])
