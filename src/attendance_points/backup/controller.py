from __future__ import annotations

from flask import Flask, request

from ..common import datetime_utils
from ..common.datetime_utils import date_stamp
from ..common.http import api_errors, fail, json_body, ok
from ..common.validators import parse_flag
from ..container import Container
from .service import backup_filename


def register(app: Flask, container: Container) -> None:
    svc = container.backup_service

    def _attachment(body: bytes, *, mimetype: str, filename: str):
        return app.response_class(
            body,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/backup.json", methods=["GET"], endpoint="download_backup")
    @api_errors
    def download_backup():
        filename = backup_filename(datetime_utils.today_local())
        return _attachment(svc.export_json().encode("utf-8"), mimetype="application/json", filename=filename)

    @app.route("/backup/restore", methods=["POST"], endpoint="restore_backup")
    @api_errors
    def restore_backup():
        upload = request.files.get("file")
        if upload is not None:
            content = upload.read()
        else:
            content = request.get_data()
        if not content:
            return fail("No backup file supplied", 400)

        result = svc.restore(content)
        return ok(
            {
                "employees": result.employees,
                "incidents": result.incidents,
                "message": f"Restored {result.employees} employees and {result.incidents} incidents",
            }
        )

    @app.route("/report.csv", methods=["GET"], endpoint="download_report")
    @api_errors
    def download_report():
        today = datetime_utils.today_local()
        detailed = request.args.get("format", "simple") == "detailed"
        csv_text = svc.export_csv(today=today, detailed=detailed)
        prefix = "attendance-report" if detailed else "attendance-incidents"
        return _attachment(
            csv_text.encode("utf-8-sig"),
            mimetype="text/csv",
            filename=f"{prefix}-{date_stamp(today)}.csv",
        )

    @app.route("/api/auto-backup", methods=["GET"], endpoint="auto_backup_status")
    @api_errors
    def auto_backup_status():
        status = svc.auto_backup_status()
        return ok(
            {
                "enabled": status.enabled,
                "taken_at": status.taken_at.isoformat() if status.taken_at else None,
                "employees": status.employees,
                "incidents": status.incidents,
            }
        )

    @app.route("/api/auto-backup", methods=["POST"], endpoint="toggle_auto_backup")
    @api_errors
    def toggle_auto_backup():
        enabled = parse_flag(json_body().get("enabled", False), "Enabled")
        svc.set_auto_backup(enabled)
        return ok({"enabled": enabled})

    @app.route("/api/auto-backup/restore", methods=["POST"], endpoint="restore_auto_backup")
    @api_errors
    def restore_auto_backup():
        result = svc.restore_auto_backup()
        return ok({"employees": result.employees, "incidents": result.incidents})
