from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.enums import ExportFilter
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/download", methods=["GET"], endpoint="api_download")
    def api_download():
        """CSV download of all records or only today's (?filter=all|today)."""

        try:
            export_filter = ExportFilter.parse(request.args.get("filter"))
            export = container.export_service.build_export(export_filter)

            return app.response_class(
                export.content,
                mimetype="text/csv",
                headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
            )
        except Exception:
            app.logger.exception("Error generating CSV")
            return jsonify({"error": "Failed to generate CSV"}), 500
