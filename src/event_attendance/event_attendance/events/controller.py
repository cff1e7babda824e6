from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_string
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/event", methods=["GET"], endpoint="api_event_get")
    def api_event_get():
        try:
            return jsonify({"eventName": container.attendance_service.get_event_name()}), 200
        except Exception:
            app.logger.exception("Error getting event name")
            return jsonify({"error": "Failed to get event name"}), 500

    @app.route("/api/event", methods=["PUT"], endpoint="api_event_update")
    def api_event_update():
        try:
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                data = {}
            event_name = require_string(data.get("eventName"), "Event name is required")

            event_name = container.attendance_service.set_event_name(event_name)
            app.logger.info("Event renamed to %r", event_name)
            return jsonify({
                "success": True,
                "eventName": event_name,
                "message": "Event name updated successfully",
            }), 200
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            app.logger.exception("Error setting event name")
            return jsonify({"error": "Failed to update event name"}), 500
