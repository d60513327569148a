from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.http import api_errors
from ..container import Container
from ..payroll.service import policy_from_payload

SUMMARY_FIELDS = ["id", "name", "presentDays", "leaveHours", "overtimeHours"]


def register(app: Flask, container: Container) -> None:
    def _write_summary_csv(*, rows: list[dict], filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=SUMMARY_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/save", methods=["POST"], endpoint="api_save")
    @api_errors
    def api_save():
        payload = request.get_json(silent=True) or {}
        container.history_service.save(payload)
        return jsonify({"success": True})

    @app.route("/api/history", methods=["GET"], endpoint="api_history_list")
    @api_errors
    def api_history_list():
        records = container.history_service.list_records()
        return jsonify({"records": [r.to_dict() for r in records]})

    @app.route("/api/history", methods=["DELETE"], endpoint="api_history_delete")
    @api_errors
    def api_history_delete():
        record_id = request.args.get("id")
        if not record_id:
            return jsonify({"success": False, "error": "Missing record id"}), 400
        container.history_service.delete(record_id)
        return jsonify({"success": True})

    @app.route("/api/history/<record_id>", methods=["GET"], endpoint="api_history_get")
    @api_errors
    def api_history_get(record_id: str):
        return jsonify(container.history_service.get(record_id).to_dict())

    @app.route("/api/history/<record_id>/summary", methods=["GET"], endpoint="api_history_summary")
    @api_errors
    def api_history_summary(record_id: str):
        monthly = container.history_service.load_monthly(record_id)
        return jsonify(
            {
                "monthDisplay": monthly.month_display,
                "employees": container.payroll_service.monthly_summary(monthly),
            }
        )

    @app.route("/api/history/<record_id>/summary.csv", methods=["GET"], endpoint="api_history_summary_csv")
    @api_errors
    def api_history_summary_csv(record_id: str):
        monthly = container.history_service.load_monthly(record_id)
        rows = container.payroll_service.monthly_summary(monthly)
        filename = f"attendance_summary_{monthly.year:04d}{monthly.month:02d}.csv"
        return _write_summary_csv(rows=rows, filename=filename)

    @app.route("/api/history/<record_id>/salary", methods=["POST"], endpoint="api_history_salary")
    @api_errors
    def api_history_salary(record_id: str):
        payload = request.get_json(silent=True) or {}
        monthly = container.history_service.load_monthly(record_id)
        employee = container.payroll_service.find_employee(monthly, payload.get("employeeId"))
        policy = policy_from_payload(payload)

        result = container.payroll_service.salary_for(employee, monthly.year, monthly.month, policy)
        return jsonify(result.to_dict())

    @app.route("/api/store/info", methods=["GET"], endpoint="api_store_info")
    @api_errors
    def api_store_info():
        records = container.history_service.list_records()
        return jsonify(
            {
                "backend": container.history_backend,
                "recordsCount": len(records),
                "ids": [r.record_id for r in records],
            }
        )
