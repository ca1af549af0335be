from __future__ import annotations

from flask import Flask, request

from ..common import datetime_utils
from ..common.datetime_utils import parse_optional_date
from ..common.http import api_errors, json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.incident_service

    @app.route("/api/incidents", methods=["GET"], endpoint="list_incidents")
    @api_errors
    def list_incidents():
        rows = svc.history_ui(
            today=datetime_utils.today_local(),
            employee_id=request.args.get("employee_id") or None,
        )
        return ok({"incidents": rows})

    @app.route("/api/incidents", methods=["POST"], endpoint="add_incident")
    @api_errors
    def add_incident():
        data = json_body()
        incident = svc.add_incident(
            employee_id=str(data.get("employee_id") or ""),
            incident_date=parse_optional_date(data.get("date"), "Date", default=datetime_utils.today_local()),
            incident_type=data.get("type", ""),
            notes=data.get("notes", ""),
            points=data.get("points"),
        )
        return ok({"id": incident.incident_id, "points": incident.points, "message": "Incident recorded"}, 201)

    @app.route("/api/incidents/<incident_id>", methods=["PUT"], endpoint="update_incident")
    @api_errors
    def update_incident(incident_id: str):
        data = json_body()
        incident = svc.update_incident(
            incident_id,
            incident_date=parse_optional_date(data.get("date"), "Date"),
            incident_type=data.get("type", ""),
            notes=data.get("notes", ""),
            points=data.get("points"),
            employee_id=data.get("employee_id") or None,
        )
        return ok({"points": incident.points, "message": "Incident updated"})

    @app.route("/api/incidents/<incident_id>", methods=["DELETE"], endpoint="delete_incident")
    @api_errors
    def delete_incident(incident_id: str):
        svc.delete_incident(incident_id)
        return ok({"message": "Incident removed"})

    @app.route("/api/employees/<employee_id>/adjustments", methods=["POST"], endpoint="adjust_points")
    @api_errors
    def adjust_points(employee_id: str):
        data = json_body()
        today = datetime_utils.today_local()
        incident = svc.adjust_points(
            employee_id,
            delta=data.get("delta"),
            adjusted_on=parse_optional_date(data.get("date"), "Date", default=today),
            note=data.get("note", ""),
        )
        points = container.engine.points_for(employee_id, container.store.load()[1])
        return ok({"applied": incident.points, "points": points, "message": "Points adjusted"}, 201)
