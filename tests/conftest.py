from __future__ import annotations

from datetime import date
from itertools import count

import pytest

from attendance_points.core.enums import IncidentType
from attendance_points.employees.model import Employee
from attendance_points.incidents.model import Incident
from attendance_points.policy.engine import PolicyEngine
from attendance_points.policy.valuation import point_value_for
from attendance_points.storage.local_storage import MemoryStorage
from attendance_points.storage.store import AttendanceStore


@pytest.fixture
def today() -> date:
    return date(2025, 6, 30)


@pytest.fixture
def store() -> AttendanceStore:
    return AttendanceStore(MemoryStorage())


@pytest.fixture
def engine() -> PolicyEngine:
    return PolicyEngine()


@pytest.fixture
def make_incident():
    ids = count(1)

    def _make(employee_id: str, day: date, kind: IncidentType | str, points: int | None = None, notes=None) -> Incident:
        label = kind.value if isinstance(kind, IncidentType) else kind
        return Incident(
            incident_id=f"inc-{next(ids)}",
            employee_id=employee_id,
            incident_date=day,
            incident_type=label,
            points=point_value_for(label, points),
            notes=notes,
        )

    return _make


@pytest.fixture
def employee() -> Employee:
    return Employee(employee_id="e1", name="Dana Whitfield", position="RBT", center="Beachwood", hire_date=date(2020, 1, 6))
