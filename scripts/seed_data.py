"""Seed a few demo employees and incidents into the configured store."""

from __future__ import annotations

import importlib
from datetime import timedelta

from dotenv import load_dotenv

from attendance_points.common.datetime_utils import today_local
from attendance_points.config import get_settings_module
from attendance_points.container import build_container
from attendance_points.core.enums import IncidentType


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)
    employees = container.employee_service
    incidents = container.incident_service
    today = today_local()

    ana = employees.add_employee(name="Ana Lopez", position="RBT", center="Beachwood", today=today)
    ben = employees.add_employee(name="Ben Carter", position="BCBA", center="Columbus", today=today)
    employees.add_employee(name="Chloe Adams", position="RBT", center="Columbus", today=today)

    for days_ago in (12, 11, 10):
        incidents.add_incident(
            employee_id=ana.employee_id,
            incident_date=today - timedelta(days=days_ago),
            incident_type=IncidentType.ILLNESS.value,
            notes="Flu",
        )
    incidents.add_incident(
        employee_id=ana.employee_id,
        incident_date=today - timedelta(days=3),
        incident_type=IncidentType.LATE_ARRIVAL.value,
    )
    incidents.add_incident(
        employee_id=ben.employee_id,
        incident_date=today - timedelta(days=40),
        incident_type=IncidentType.UNNOTIFIED_ABSENCE.value,
    )

    print(f"OK: Seeded {len(employees.list_employees())} employees")


if __name__ == "__main__":
    main()
