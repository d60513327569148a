from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/import", methods=["POST"], endpoint="api_attendance_import")
    @api_errors
    def api_attendance_import():
        """Import a vendor CSV export for one month.

        Accepts a multipart upload in ``file`` or the raw CSV as request body;
        ``year`` and ``month`` come from the form or the query string.
        """

        upload = request.files.get("file")
        content = upload.read() if upload else request.get_data()
        year = request.values.get("year")
        month = request.values.get("month")

        monthly = container.attendance_import_service.import_csv(content, year, month)
        return jsonify(container.attendance_import_service.export(monthly))

    @app.route("/api/attendance/import/json", methods=["POST"], endpoint="api_attendance_import_json")
    @api_errors
    def api_attendance_import_json():
        payload = request.get_json(silent=True)
        monthly = container.attendance_import_service.load_export(payload)
        return jsonify(container.attendance_import_service.export(monthly))

    @app.route("/api/attendance/export", methods=["POST"], endpoint="api_attendance_export")
    @api_errors
    def api_attendance_export():
        """Normalize an attendance document and attach per-employee statistics."""
        payload = request.get_json(silent=True)
        monthly = container.attendance_import_service.load_export(payload)
        return jsonify(container.attendance_import_service.export(monthly, with_statistics=True))
