from __future__ import annotations

from datetime import date, timedelta

import pytest

from attendance_points.core.enums import CorrectiveAction, IncidentType
from attendance_points.core.exceptions import NotFoundError, ValidationError
from attendance_points.employees.service import BULK_CLEAR_REMARK, EmployeeService, standing_to_ui
from attendance_points.incidents.service import IncidentService


@pytest.fixture
def employees(store, engine) -> EmployeeService:
    return EmployeeService(store, engine, default_center="Beachwood")


@pytest.fixture
def incidents(store, engine) -> IncidentService:
    return IncidentService(store, engine)


def test_add_employee_defaults_center_and_hire_date(employees, today):
    emp = employees.add_employee(name="  Dana Whitfield ", position="RBT", today=today)

    assert emp.name == "Dana Whitfield"
    assert emp.center == "Beachwood"
    assert emp.hire_date == today
    assert employees.get(emp.employee_id) == emp


def test_add_employee_requires_name(employees, today):
    with pytest.raises(ValidationError):
        employees.add_employee(name="   ", today=today)


def test_roster_is_sorted_by_last_name_and_searchable(employees, today):
    employees.add_employee(name="Zoe Abbott", position="BCBA", center="Columbus", today=today)
    employees.add_employee(name="Amy Zimmer", position="RBT", today=today)
    employees.add_employee(name="John A. Moss Jr.", position="RBT", today=today)

    assert [e.name for e in employees.list_employees()] == ["Zoe Abbott", "John A. Moss Jr.", "Amy Zimmer"]
    assert [e.name for e in employees.list_employees(search="columbus")] == ["Zoe Abbott"]
    assert [e.name for e in employees.list_employees(search="rbt")] == ["John A. Moss Jr.", "Amy Zimmer"]


def test_update_employee_keeps_identity(employees, today):
    emp = employees.add_employee(name="Dana Whitfield", position="RBT", today=today)

    updated = employees.update_employee(emp.employee_id, name="Dana Price", position="Lead RBT", center="Columbus")

    assert updated.employee_id == emp.employee_id
    assert updated.name == "Dana Price"
    assert updated.center == "Columbus"
    assert updated.hire_date == emp.hire_date


def test_delete_employee_cascades_to_incidents(store, employees, incidents, today):
    keep = employees.add_employee(name="Keep Me", today=today)
    drop = employees.add_employee(name="Drop Me", today=today)
    for n in range(3):
        incidents.add_incident(employee_id=drop.employee_id, incident_date=today - timedelta(days=n), incident_type="Late Arrival")
    incidents.add_incident(employee_id=keep.employee_id, incident_date=today, incident_type="Late Arrival")

    removed = employees.delete_employee(drop.employee_id)

    _, remaining = store.load()
    assert removed == 3
    assert [i.employee_id for i in remaining] == [keep.employee_id]


def test_delete_unknown_employee_raises(employees):
    with pytest.raises(NotFoundError):
        employees.delete_employee("missing")


def test_overview_reports_points_and_alerts(employees, incidents, today):
    emp = employees.add_employee(name="Dana Whitfield", today=today)
    incidents.add_incident(employee_id=emp.employee_id, incident_date=today, incident_type=IncidentType.UNNOTIFIED_ABSENCE.value)

    [standing] = employees.overview(today=today)
    row = standing_to_ui(standing)

    assert row["points"] == 10
    assert row["action"] == "Written Warning"
    assert row["no_call_no_shows"] == 1
    assert row["alert"] is True


def test_record_notification_appends_history_and_clears_alert(employees, incidents, today):
    emp = employees.add_employee(name="Dana Whitfield", today=today)
    incidents.add_incident(employee_id=emp.employee_id, incident_date=today, incident_type="Planned Absence")

    note = employees.record_notification(emp.employee_id, notified_on=today, today=today, remark="Met in office")

    stored = employees.get(emp.employee_id)
    assert note.action == CorrectiveAction.VERBAL_WARNING.value
    assert note.points_at_time == 4
    assert stored.notifications == (note,)
    assert stored.notification_cleared is True
    assert stored.last_notified == today
    assert employees.alerts(today=today) == []


def test_record_notification_without_action_to_notify(employees, today):
    emp = employees.add_employee(name="Dana Whitfield", today=today)

    with pytest.raises(ValidationError):
        employees.record_notification(emp.employee_id, notified_on=today, today=today)


def test_restore_alert_reraises_it(employees, incidents, today):
    emp = employees.add_employee(name="Dana Whitfield", today=today)
    incidents.add_incident(employee_id=emp.employee_id, incident_date=today, incident_type="Planned Absence")
    employees.clear_alert(emp.employee_id, today=today)
    assert employees.alerts(today=today) == []

    employees.restore_alert(emp.employee_id)

    assert [a.employee.employee_id for a in employees.alerts(today=today)] == [emp.employee_id]


def test_clear_all_alerts_in_one_batch(employees, incidents, today):
    a = employees.add_employee(name="Ann Alpha", today=today)
    b = employees.add_employee(name="Bob Beta", today=today)
    c = employees.add_employee(name="Cat Gamma", today=today)
    incidents.add_incident(employee_id=a.employee_id, incident_date=today, incident_type="Planned Absence")
    incidents.add_incident(employee_id=b.employee_id, incident_date=today, incident_type="Unnotified Absence")
    incidents.add_incident(employee_id=c.employee_id, incident_date=today, incident_type="Late Arrival")

    cleared = employees.clear_all_alerts(today=today)

    assert cleared == 2
    assert employees.alerts(today=today) == []
    bob = employees.get(b.employee_id)
    assert bob.last_notified == today
    assert bob.notifications[-1].remark == BULK_CLEAR_REMARK
    assert employees.get(c.employee_id).notification_cleared is False


def test_clear_all_with_nothing_alerting(employees, today):
    employees.add_employee(name="Quiet Person", today=today)
    assert employees.clear_all_alerts(today=today) == 0
