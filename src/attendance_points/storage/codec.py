"""Conversion between domain objects and the JSON document shape.

Wire keys follow the backup format (camelCase). Decoding also accepts the
older record shapes: ``first``/``last`` instead of ``name``, ``reason``
instead of ``type`` and ``pts`` instead of ``points``.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..core.exceptions import BackupFormatError
from ..employees.model import Employee, Notification
from ..incidents.model import Incident
from ..policy.valuation import point_value_for


def _date_or_none(value: Any, field_name: str) -> Optional[date]:
    if value in (None, ""):
        return None
    if not isinstance(value, str):
        raise BackupFormatError(f"{field_name}: expected a date string, got {value!r}")
    try:
        # Tolerate full ISO timestamps, only the calendar date matters.
        return parse_iso_date(value[:10])
    except ValueError:
        raise BackupFormatError(f"{field_name}: invalid date {value!r}")


def _required_date(value: Any, field_name: str) -> date:
    d = _date_or_none(value, field_name)
    if d is None:
        raise BackupFormatError(f"{field_name} is missing")
    return d


def _required_id(raw: dict, key: str, what: str) -> str:
    value = raw.get(key)
    if value is None or str(value).strip() == "":
        raise BackupFormatError(f"{what} without {key}")
    return str(value)


def _int(value: Any, field_name: str, default: int = 0) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise BackupFormatError(f"{field_name}: expected a number, got {value!r}")


def notification_to_dict(n: Notification) -> dict:
    return {
        "action": n.action,
        "date": format_iso_date(n.notified_on),
        "pointsAtTime": n.points_at_time,
        "remark": n.remark,
    }


def notification_from_dict(raw: Any) -> Notification:
    if not isinstance(raw, dict):
        raise BackupFormatError("notification entries must be objects")
    return Notification(
        action=str(raw.get("action") or ""),
        notified_on=_required_date(raw.get("date"), "notification date"),
        points_at_time=_int(raw.get("pointsAtTime"), "pointsAtTime"),
        remark=str(raw.get("remark") or ""),
    )


def employee_to_dict(e: Employee) -> dict:
    return {
        "id": e.employee_id,
        "name": e.name,
        "position": e.position,
        "center": e.center,
        "hireDate": format_iso_date(e.hire_date),
        "notifications": [notification_to_dict(n) for n in e.notifications],
        "notificationCleared": e.notification_cleared,
        "lastNotified": format_iso_date(e.last_notified),
    }


def employee_from_dict(raw: Any) -> Employee:
    if not isinstance(raw, dict):
        raise BackupFormatError("employee entries must be objects")

    employee_id = _required_id(raw, "id", "employee")
    name = raw.get("name")
    if not name:
        name = " ".join(str(p).strip() for p in (raw.get("first"), raw.get("last")) if p)

    notifications = raw.get("notifications") or []
    if not isinstance(notifications, list):
        raise BackupFormatError(f"employee {employee_id}: notifications must be a list")

    return Employee(
        employee_id=employee_id,
        name=str(name or ""),
        position=str(raw.get("position") or raw.get("title") or ""),
        center=str(raw.get("center") or ""),
        hire_date=_date_or_none(raw.get("hireDate"), f"employee {employee_id} hireDate"),
        notifications=tuple(notification_from_dict(n) for n in notifications),
        notification_cleared=bool(raw.get("notificationCleared", False)),
        last_notified=_date_or_none(raw.get("lastNotified"), f"employee {employee_id} lastNotified"),
    )


def incident_to_dict(i: Incident) -> dict:
    return {
        "id": i.incident_id,
        "employeeId": i.employee_id,
        "date": format_iso_date(i.incident_date),
        "type": i.incident_type,
        "points": i.points,
        "notes": i.notes or "",
    }


def incident_from_dict(raw: Any) -> Incident:
    if not isinstance(raw, dict):
        raise BackupFormatError("incident entries must be objects")

    incident_id = _required_id(raw, "id", "incident")
    incident_type = str(raw.get("type") or raw.get("reason") or "")

    stored = raw.get("points", raw.get("pts"))
    points = _int(stored, f"incident {incident_id} points") if stored is not None else point_value_for(incident_type)

    return Incident(
        incident_id=incident_id,
        employee_id=str(raw.get("employeeId") or ""),
        incident_date=_required_date(raw.get("date"), f"incident {incident_id} date"),
        incident_type=incident_type,
        points=points,
        notes=raw.get("notes") or None,
    )


def encode_document(employees, incidents) -> dict:
    return {
        "employees": [employee_to_dict(e) for e in employees],
        "incidents": [incident_to_dict(i) for i in incidents],
    }


def decode_document(data: Any) -> tuple[list[Employee], list[Incident]]:
    """Decode ``{employees, incidents}``; a missing or non-list field is empty."""
    if not isinstance(data, dict):
        raise BackupFormatError("backup must be a JSON object with employees and incidents")

    raw_employees = data.get("employees")
    raw_incidents = data.get("incidents")
    employees = [employee_from_dict(e) for e in raw_employees] if isinstance(raw_employees, list) else []
    incidents = [incident_from_dict(i) for i in raw_incidents] if isinstance(raw_incidents, list) else []
    return employees, incidents
