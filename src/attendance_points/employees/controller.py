from __future__ import annotations

from flask import Flask, request

from ..common import datetime_utils
from ..common.datetime_utils import format_iso_date, parse_optional_date
from ..common.http import api_errors, json_body, ok
from ..container import Container
from .service import alert_to_ui, standing_to_ui


def register(app: Flask, container: Container) -> None:
    svc = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @api_errors
    def list_employees():
        today = datetime_utils.today_local()
        rows = svc.overview(today=today, search=request.args.get("q", ""))
        return ok({"employees": [standing_to_ui(s) for s in rows], "centers": list(container.centers)})

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @api_errors
    def add_employee():
        data = json_body()
        employee = svc.add_employee(
            name=data.get("name", ""),
            position=data.get("position", ""),
            center=data.get("center", ""),
            hire_date=parse_optional_date(data.get("hire_date"), "Hire date"),
            today=datetime_utils.today_local(),
        )
        return ok({"id": employee.employee_id, "message": "Employee added"}, 201)

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @api_errors
    def update_employee(employee_id: str):
        data = json_body()
        svc.update_employee(
            employee_id,
            name=data.get("name", ""),
            position=data.get("position", ""),
            center=data.get("center", ""),
            hire_date=parse_optional_date(data.get("hire_date"), "Hire date"),
        )
        return ok({"message": "Employee updated"})

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @api_errors
    def delete_employee(employee_id: str):
        removed = svc.delete_employee(employee_id)
        return ok({"message": "Employee deleted", "incidents_removed": removed})

    @app.route("/api/employees/<employee_id>/notifications", methods=["POST"], endpoint="notify_employee")
    @api_errors
    def notify_employee(employee_id: str):
        data = json_body()
        today = datetime_utils.today_local()
        note = svc.record_notification(
            employee_id,
            notified_on=parse_optional_date(data.get("date"), "Notification date", default=today),
            today=today,
            action=data.get("action"),
            remark=data.get("remark", ""),
        )
        return ok(
            {
                "message": "Notification saved",
                "notification": {
                    "action": note.action,
                    "date": format_iso_date(note.notified_on),
                    "points_at_time": note.points_at_time,
                    "remark": note.remark,
                },
            },
            201,
        )

    @app.route("/api/alerts", methods=["GET"], endpoint="list_alerts")
    @api_errors
    def list_alerts():
        alerts = svc.alerts(today=datetime_utils.today_local())
        return ok({"alerts": [alert_to_ui(a) for a in alerts]})

    @app.route("/api/alerts/clear-all", methods=["POST"], endpoint="clear_all_alerts")
    @api_errors
    def clear_all_alerts():
        cleared = svc.clear_all_alerts(today=datetime_utils.today_local())
        return ok({"cleared": cleared})

    @app.route("/api/employees/<employee_id>/alert/clear", methods=["POST"], endpoint="clear_alert")
    @api_errors
    def clear_alert(employee_id: str):
        svc.clear_alert(employee_id, today=datetime_utils.today_local())
        return ok({"message": "Alert cleared"})

    @app.route("/api/employees/<employee_id>/alert/restore", methods=["POST"], endpoint="restore_alert")
    @api_errors
    def restore_alert(employee_id: str):
        svc.restore_alert(employee_id)
        return ok({"message": "Alert restored"})

    @app.route("/api/policy", methods=["GET"], endpoint="policy_reference")
    def policy_reference():
        return ok({"policy": container.engine.policy_reference()})
