from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import format_iso_date
from ..common.ids import new_id
from ..common.validators import optional_text, require_int, require_non_empty
from ..core.constants import UNKNOWN_EMPLOYEE
from ..core.enums import IncidentType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..policy.aging import is_eligible_for_good_behavior_removal, removal_label
from ..policy.engine import PolicyEngine
from ..policy.valuation import effective_adjustment, incidents_for, point_value_for, rebalance_adjustments
from ..storage.store import AttendanceStore
from .model import Incident

logger = logging.getLogger(__name__)


class IncidentService:
    """Use case: record, edit and remove attendance incidents."""

    def __init__(self, store: AttendanceStore, engine: PolicyEngine):
        self._store = store
        self._engine = engine

    @staticmethod
    def _find(incidents: list[Incident], incident_id: str) -> tuple[int, Incident]:
        for idx, i in enumerate(incidents):
            if i.incident_id == incident_id:
                return idx, i
        raise NotFoundError("Incident not found")

    @staticmethod
    def _require_employee(employees: Sequence[Employee], employee_id: str) -> None:
        if not any(e.employee_id == employee_id for e in employees):
            raise ValidationError("Employee does not exist")

    @staticmethod
    def _resolve_points(incident_type: str, points) -> tuple[str, int]:
        label = require_non_empty(incident_type, "Incident type")
        kind = IncidentType.parse(label)
        custom = None if points is None or points == "" else require_int(points, "Points")

        if kind is IncidentType.ADJUSTMENT:
            raise ValidationError("Use a point adjustment to change points manually")
        if (kind is None or kind is IncidentType.OTHER) and custom is None:
            raise ValidationError("Points are required for this incident type")
        if custom is not None and custom < 0:
            raise ValidationError("Points cannot be negative")

        if kind is not None:
            label = kind.value
        return label, point_value_for(label, custom)

    @staticmethod
    def _rebalance(incidents: Sequence[Incident], employee_ids: set[str]) -> list[Incident]:
        """Keep every touched employee's unfloored total at or above zero."""
        fixed: dict[str, Incident] = {}
        for eid in employee_ids:
            for i in rebalance_adjustments(incidents_for(eid, incidents)):
                fixed[i.incident_id] = i
        return [fixed.get(i.incident_id, i) for i in incidents]

    def _reset_alerts(
        self,
        employees: list[Employee],
        before: Sequence[Incident],
        after: Sequence[Incident],
        employee_ids: set[str],
    ) -> list[Employee]:
        """A changed point total starts a new alert cycle."""
        changed = {
            eid
            for eid in employee_ids
            if self._engine.points_for(eid, before) != self._engine.points_for(eid, after)
        }
        return [
            replace(e, notification_cleared=False) if e.employee_id in changed and e.notification_cleared else e
            for e in employees
        ]

    def list_incidents(self, *, employee_id: Optional[str] = None) -> list[Incident]:
        """Newest first."""
        _, incidents = self._store.load()
        if employee_id is not None:
            incidents = [i for i in incidents if i.employee_id == employee_id]
        return sorted(incidents, key=lambda i: i.incident_date, reverse=True)

    def history_ui(self, *, today: date, employee_id: Optional[str] = None) -> list[dict]:
        employees, _ = self._store.load()
        names = {e.employee_id: e.name for e in employees}
        return [self._to_ui(i, names, today) for i in self.list_incidents(employee_id=employee_id)]

    def add_incident(
        self,
        *,
        employee_id: str,
        incident_date: date,
        incident_type: str,
        notes: str = "",
        points=None,
    ) -> Incident:
        employees, incidents = self._store.load()
        self._require_employee(employees, employee_id)
        label, value = self._resolve_points(incident_type, points)

        incident = Incident(
            incident_id=new_id(),
            employee_id=employee_id,
            incident_date=incident_date,
            incident_type=label,
            points=value,
            notes=optional_text(notes) or None,
        )
        after = self._rebalance(incidents + [incident], {employee_id})
        self._store.save(self._reset_alerts(employees, incidents, after, {employee_id}), after)
        return incident

    def update_incident(
        self,
        incident_id: str,
        *,
        incident_date: Optional[date] = None,
        incident_type: str,
        notes: str = "",
        points=None,
        employee_id: Optional[str] = None,
    ) -> Incident:
        employees, incidents = self._store.load()
        idx, current = self._find(incidents, incident_id)

        target = employee_id or current.employee_id
        if target != current.employee_id:
            self._require_employee(employees, target)

        if current.kind is IncidentType.ADJUSTMENT:
            label = current.incident_type
            requested = current.points if points is None or points == "" else require_int(points, "Points")
            rest = [i for i in incidents if i.incident_id != incident_id]
            value = effective_adjustment(self._engine.points_for(target, rest), requested)
        else:
            label, value = self._resolve_points(incident_type, points)

        updated = replace(
            current,
            employee_id=target,
            incident_date=incident_date or current.incident_date,
            incident_type=label,
            points=value,
            notes=optional_text(notes) or None,
        )
        after = list(incidents)
        after[idx] = updated
        after = self._rebalance(after, {current.employee_id, target})
        updated = next(i for i in after if i.incident_id == incident_id)
        self._store.save(
            self._reset_alerts(employees, incidents, after, {current.employee_id, target}),
            after,
        )
        return updated

    def delete_incident(self, incident_id: str) -> Incident:
        employees, incidents = self._store.load()
        _, removed = self._find(incidents, incident_id)
        after = self._rebalance([i for i in incidents if i.incident_id != incident_id], {removed.employee_id})
        self._store.save(self._reset_alerts(employees, incidents, after, {removed.employee_id}), after)
        return removed

    def adjust_points(self, employee_id: str, *, delta, adjusted_on: date, note: str = "") -> Incident:
        """Record a manual point adjustment.

        The stored delta is reduced so the employee's total never goes below zero.
        """
        employees, incidents = self._store.load()
        self._require_employee(employees, employee_id)

        requested = require_int(delta, "Adjustment")
        if requested == 0:
            raise ValidationError("Adjustment must not be zero")

        current = self._engine.points_for(employee_id, incidents)
        applied = effective_adjustment(current, requested)
        if applied != requested:
            logger.info("adjustment for %s clamped from %d to %d", employee_id, requested, applied)

        incident = Incident(
            incident_id=new_id(),
            employee_id=employee_id,
            incident_date=adjusted_on,
            incident_type=IncidentType.ADJUSTMENT.value,
            points=applied,
            notes=optional_text(note) or None,
        )
        after = incidents + [incident]
        self._store.save(self._reset_alerts(employees, incidents, after, {employee_id}), after)
        return incident

    @staticmethod
    def _to_ui(i: Incident, names: dict[str, str], today: date) -> dict:
        return {
            "id": i.incident_id,
            "employee_id": i.employee_id,
            "employee_name": names.get(i.employee_id, UNKNOWN_EMPLOYEE),
            "date": format_iso_date(i.incident_date),
            "type": i.incident_type,
            "points": i.points,
            "notes": i.notes or "",
            "good_behavior_eligible": is_eligible_for_good_behavior_removal(i.incident_date, today),
            "remove_label": removal_label(i.incident_date, today),
        }
