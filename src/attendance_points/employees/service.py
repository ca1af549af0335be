from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_iso_date
from ..common.ids import new_id
from ..common.validators import optional_text, require_non_empty
from ..core.enums import CorrectiveAction
from ..core.exceptions import NotFoundError, ValidationError
from ..policy.engine import Alert, PolicyEngine, Standing
from ..storage.store import AttendanceStore
from .model import Employee, Notification, sort_key

logger = logging.getLogger(__name__)

BULK_CLEAR_REMARK = "Cleared with all alerts"


class EmployeeService:
    """Use case: manage the roster and its alert/notification state."""

    def __init__(self, store: AttendanceStore, engine: PolicyEngine, *, default_center: str = ""):
        self._store = store
        self._engine = engine
        self._default_center = default_center

    @staticmethod
    def _find(employees: list[Employee], employee_id: str) -> tuple[int, Employee]:
        for idx, e in enumerate(employees):
            if e.employee_id == employee_id:
                return idx, e
        raise NotFoundError("Employee not found")

    def list_employees(self, *, search: str = "") -> list[Employee]:
        """Roster sorted by last name, optionally filtered by name/position/center."""
        employees, _ = self._store.load()
        term = optional_text(search).lower()
        if term:
            employees = [
                e
                for e in employees
                if term in e.name.lower() or term in e.position.lower() or term in e.center.lower()
            ]
        return sorted(employees, key=sort_key)

    def get(self, employee_id: str) -> Employee:
        employees, _ = self._store.load()
        return self._find(employees, employee_id)[1]

    def overview(self, *, today: date, search: str = "") -> list[Standing]:
        _, incidents = self._store.load()
        return [self._engine.standing(e, incidents, today=today) for e in self.list_employees(search=search)]

    def alerts(self, *, today: date) -> list[Alert]:
        employees, incidents = self._store.load()
        return self._engine.alerts(employees, incidents, today=today)

    def add_employee(
        self,
        *,
        name: str,
        position: str = "",
        center: str = "",
        hire_date: Optional[date] = None,
        today: date,
    ) -> Employee:
        employees, incidents = self._store.load()
        employee = Employee(
            employee_id=new_id(),
            name=require_non_empty(name, "Name"),
            position=optional_text(position),
            center=optional_text(center) or self._default_center,
            hire_date=hire_date or today,
        )
        employees.append(employee)
        self._store.save(employees, incidents)
        return employee

    def update_employee(
        self,
        employee_id: str,
        *,
        name: str,
        position: str = "",
        center: str = "",
        hire_date: Optional[date] = None,
    ) -> Employee:
        employees, incidents = self._store.load()
        idx, current = self._find(employees, employee_id)
        updated = replace(
            current,
            name=require_non_empty(name, "Name"),
            position=optional_text(position),
            center=optional_text(center) or current.center,
            hire_date=hire_date or current.hire_date,
        )
        employees[idx] = updated
        self._store.save(employees, incidents)
        return updated

    def delete_employee(self, employee_id: str) -> int:
        """Delete an employee and every incident referencing it.

        Returns the number of incidents removed with it.
        """
        employees, incidents = self._store.load()
        self._find(employees, employee_id)

        remaining = [i for i in incidents if i.employee_id != employee_id]
        removed = len(incidents) - len(remaining)
        self._store.save([e for e in employees if e.employee_id != employee_id], remaining)
        logger.info("deleted employee %s with %d incident(s)", employee_id, removed)
        return removed

    def record_notification(
        self,
        employee_id: str,
        *,
        notified_on: date,
        today: date,
        action: Optional[str] = None,
        remark: str = "",
    ) -> Notification:
        """Log a delivered notice and clear the current alert.

        Without an explicit action the current recommendation is recorded.
        """
        employees, incidents = self._store.load()
        idx, employee = self._find(employees, employee_id)
        rec = self._engine.recommend(employee_id, incidents, today=today, employees=employees)

        label = optional_text(action) or rec.action.value
        if label == CorrectiveAction.NONE.value:
            raise ValidationError("Nothing to notify: no corrective action is recommended")

        note = Notification(action=label, notified_on=notified_on, points_at_time=rec.points, remark=optional_text(remark))
        employees[idx] = replace(
            employee,
            notifications=employee.notifications + (note,),
            notification_cleared=True,
            last_notified=notified_on,
        )
        self._store.save(employees, incidents)
        return note

    def clear_alert(self, employee_id: str, *, today: date) -> Employee:
        employees, incidents = self._store.load()
        idx, employee = self._find(employees, employee_id)
        employees[idx] = replace(employee, notification_cleared=True, last_notified=today)
        self._store.save(employees, incidents)
        return employees[idx]

    def restore_alert(self, employee_id: str) -> Employee:
        employees, incidents = self._store.load()
        idx, employee = self._find(employees, employee_id)
        employees[idx] = replace(employee, notification_cleared=False)
        self._store.save(employees, incidents)
        return employees[idx]

    def clear_all_alerts(self, *, today: date) -> int:
        """Acknowledge every current alert in one batch; returns how many."""
        employees, incidents = self._store.load()
        alerting = {a.employee.employee_id: a for a in self._engine.alerts(employees, incidents, today=today)}
        if not alerting:
            return 0

        for idx, employee in enumerate(employees):
            alert = alerting.get(employee.employee_id)
            if not alert:
                continue
            note = Notification(
                action=alert.action.value,
                notified_on=today,
                points_at_time=alert.points,
                remark=BULK_CLEAR_REMARK,
            )
            employees[idx] = replace(
                employee,
                notifications=employee.notifications + (note,),
                notification_cleared=True,
                last_notified=today,
            )

        self._store.save(employees, incidents)
        logger.info("cleared %d alert(s)", len(alerting))
        return len(alerting)


def standing_to_ui(s: Standing) -> dict:
    e = s.employee
    return {
        "id": e.employee_id,
        "name": e.name,
        "position": e.position,
        "center": e.center,
        "hire_date": format_iso_date(e.hire_date),
        "points": s.points,
        "action": s.action.value,
        "severity": s.action.severity,
        "no_call_no_shows": s.ncns_count,
        "alert": s.alert,
        "previously_notified": s.previously_notified,
        "last_notified": format_iso_date(e.last_notified),
        "notifications": [
            {
                "action": n.action,
                "date": format_iso_date(n.notified_on),
                "points_at_time": n.points_at_time,
                "remark": n.remark,
            }
            for n in e.notifications
        ],
    }


def alert_to_ui(a: Alert) -> dict:
    return {
        "employee_id": a.employee.employee_id,
        "name": a.employee.name,
        "center": a.employee.center,
        "action": a.action.value,
        "points": a.points,
        "previously_notified": a.previously_notified,
    }
