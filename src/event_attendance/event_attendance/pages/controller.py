from __future__ import annotations

from flask import Flask, render_template

from ..core.constants import ADMIN_RECENT_LIMIT
from ..container import Container
from ..export.csv_formatter import record_time_of_day


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="home")
    def home():
        event_name = container.attendance_service.get_event_name()
        return render_template("home.html", event_name=event_name, active_page="home")

    @app.route("/attendance", endpoint="checkin_page")
    def checkin_page():
        event_name = container.attendance_service.get_event_name()
        return render_template("attendance.html", event_name=event_name, active_page="attendance")

    @app.route("/admin", endpoint="admin")
    def admin():
        document = container.attendance_service.load()
        today = container.attendance_service.list_today()

        # Newest first, capped so the page stays small.
        recent = list(reversed(document.records))[:ADMIN_RECENT_LIMIT]
        rows = [
            {
                "school_id": r.school_id,
                "name": r.name,
                "date": r.date,
                "time": record_time_of_day(r, tz=container.tz),
            }
            for r in recent
        ]

        return render_template(
            "admin.html",
            event_name=document.event_name,
            total_count=len(document.records),
            today_count=len(today),
            rows=rows,
            recent_limit=ADMIN_RECENT_LIMIT,
            active_page="admin",
        )
