from __future__ import annotations

import csv
import io
from datetime import date

from attendance_points.backup.csv_export import export_detailed_csv, export_incidents_csv
from attendance_points.employees.model import Employee
from attendance_points.incidents.model import Incident


def _rows(text: str) -> list[list[str]]:
    return list(csv.reader(io.StringIO(text)))


def _data():
    employees = [Employee(employee_id="e1", name='Dana "DJ" Whitfield', position="RBT, Lead", center="Beachwood")]
    incidents = [
        Incident(incident_id="i2", employee_id="gone", incident_date=date(2025, 1, 9), incident_type="Late Arrival", points=2),
        Incident(
            incident_id="i1",
            employee_id="e1",
            incident_date=date(2025, 1, 8),
            incident_type="Unnotified Absence",
            points=10,
            notes="No call, no show",
        ),
    ]
    return employees, incidents


def test_simple_export_header_and_rows():
    employees, incidents = _data()

    rows = _rows(export_incidents_csv(employees, incidents))

    assert rows[0] == ["Employee", "Center", "Date", "Reason", "Points"]
    assert rows[1] == ['Dana "DJ" Whitfield', "Beachwood", "2025-01-08", "Unnotified Absence", "10"]
    assert rows[2] == ["Unknown", "", "2025-01-09", "Late Arrival", "2"]


def test_fields_with_quotes_and_commas_are_quoted():
    employees, incidents = _data()

    text = export_incidents_csv(employees, incidents)

    assert '"Dana ""DJ"" Whitfield"' in text


def test_detailed_export_has_summary_and_incident_blocks(engine):
    employees, incidents = _data()

    rows = _rows(export_detailed_csv(employees, incidents, engine=engine, today=date(2025, 1, 31)))

    assert rows[0] == ["Employee Name", "Position", "Center", "Current Points", "Status", "No-Call/No-Shows"]
    assert rows[1] == ['Dana "DJ" Whitfield', "RBT, Lead", "Beachwood", "10", "Written Warning", "1"]
    assert rows[2] == []
    assert rows[3] == ["Attendance Incidents"]
    assert rows[4] == ["Employee Name", "Date", "Issue Type", "Points", "Notes"]
    assert rows[5] == ['Dana "DJ" Whitfield', "2025-01-08", "Unnotified Absence", "10", "No call, no show"]
    assert rows[6][0] == "Unknown"
