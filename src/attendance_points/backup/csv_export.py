"""CSV reports of the roster and its incidents.

Quoting follows the csv module defaults: fields containing commas, quotes
or newlines are quoted and inner quotes are doubled.
"""

from __future__ import annotations

import csv
import io
from datetime import date
from typing import Sequence

from ..common.datetime_utils import format_iso_date
from ..core.constants import UNKNOWN_EMPLOYEE
from ..employees.model import Employee, sort_key
from ..incidents.model import Incident
from ..policy.engine import PolicyEngine

SIMPLE_HEADER = ["Employee", "Center", "Date", "Reason", "Points"]
SUMMARY_HEADER = ["Employee Name", "Position", "Center", "Current Points", "Status", "No-Call/No-Shows"]
INCIDENT_HEADER = ["Employee Name", "Date", "Issue Type", "Points", "Notes"]
INCIDENTS_SECTION = "Attendance Incidents"


def _by_id(employees: Sequence[Employee]) -> dict[str, Employee]:
    return {e.employee_id: e for e in employees}


def _ordered(incidents: Sequence[Incident]) -> list[Incident]:
    return sorted(incidents, key=lambda i: i.incident_date)


def export_incidents_csv(employees: Sequence[Employee], incidents: Sequence[Incident]) -> str:
    """One row per incident; orphaned incidents show as Unknown."""
    lookup = _by_id(employees)
    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerow(SIMPLE_HEADER)
    for i in _ordered(incidents):
        e = lookup.get(i.employee_id)
        writer.writerow(
            [
                e.name if e else UNKNOWN_EMPLOYEE,
                e.center if e else "",
                format_iso_date(i.incident_date),
                i.incident_type,
                i.points,
            ]
        )
    return out.getvalue()


def export_detailed_csv(
    employees: Sequence[Employee],
    incidents: Sequence[Incident],
    *,
    engine: PolicyEngine,
    today: date,
) -> str:
    """Employee summary block, a blank line, then the incident block."""
    lookup = _by_id(employees)
    out = io.StringIO()
    writer = csv.writer(out)

    writer.writerow(SUMMARY_HEADER)
    for e in sorted(employees, key=sort_key):
        rec = engine.recommend(e.employee_id, incidents, today=today, employees=[e])
        writer.writerow(
            [
                e.name,
                e.position,
                e.center,
                rec.points,
                rec.action.value,
                engine.count_ncns(e.employee_id, incidents, today=today),
            ]
        )

    writer.writerow([])
    writer.writerow([INCIDENTS_SECTION])
    writer.writerow(INCIDENT_HEADER)
    for i in _ordered(incidents):
        e = lookup.get(i.employee_id)
        writer.writerow(
            [
                e.name if e else UNKNOWN_EMPLOYEE,
                format_iso_date(i.incident_date),
                i.incident_type,
                i.points,
                i.notes or "",
            ]
        )
    return out.getvalue()
