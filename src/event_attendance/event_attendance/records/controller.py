from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_string
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance_create")
    def api_attendance_create():
        try:
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                data = {}
            school_id = require_string(data.get("schoolId"), "School ID and name are required")
            name = require_string(data.get("name"), "School ID and name are required")

            record = container.attendance_service.append(school_id, name)
            return jsonify({
                "success": True,
                "record": record.to_dict(),
                "message": "Attendance recorded successfully",
            }), 200
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            app.logger.exception("Error adding attendance record")
            return jsonify({"error": "Failed to record attendance"}), 500

    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance_list")
    def api_attendance_list():
        try:
            records = container.attendance_service.list_all()
            return jsonify({"records": [r.to_dict() for r in records]}), 200
        except Exception:
            app.logger.exception("Error getting attendance records")
            return jsonify({"error": "Failed to fetch attendance records"}), 500

    @app.route("/api/attendance", methods=["DELETE"], endpoint="api_attendance_clear")
    def api_attendance_clear():
        try:
            container.attendance_service.clear_all()
            app.logger.info("All attendance records cleared")
            return jsonify({
                "success": True,
                "message": "All attendance records cleared successfully",
            }), 200
        except Exception:
            app.logger.exception("Error clearing attendance records")
            return jsonify({"error": "Failed to clear attendance records"}), 500
