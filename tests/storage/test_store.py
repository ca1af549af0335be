from __future__ import annotations

import json
from datetime import date

import pytest

from attendance_points.core.exceptions import BackupFormatError
from attendance_points.employees.model import Employee, Notification
from attendance_points.incidents.model import Incident
from attendance_points.storage.codec import decode_document, employee_from_dict, incident_from_dict
from attendance_points.storage.local_storage import JsonFileStorage, MemoryStorage
from attendance_points.storage.store import AttendanceStore


def _sample():
    emp = Employee(
        employee_id="e1",
        name="Dana Whitfield",
        position="RBT",
        center="Columbus",
        hire_date=date(2023, 4, 1),
        notifications=(Notification(action="Verbal Warning", notified_on=date(2025, 1, 3), points_at_time=4),),
        notification_cleared=True,
        last_notified=date(2025, 1, 3),
    )
    inc = Incident(
        incident_id="i1",
        employee_id="e1",
        incident_date=date(2025, 1, 2),
        incident_type="Planned Absence",
        points=4,
        notes='Said "sorry", left early',
    )
    return emp, inc


def test_empty_storage_loads_empty_lists():
    assert AttendanceStore(MemoryStorage()).load() == ([], [])


def test_json_file_storage_round_trip(tmp_path):
    path = tmp_path / "data" / "attendance.json"
    emp, inc = _sample()

    AttendanceStore(JsonFileStorage(path)).save([emp], [inc])
    employees, incidents = AttendanceStore(JsonFileStorage(path)).load()

    assert employees == [emp]
    assert incidents == [inc]
    raw = json.loads(path.read_text(encoding="utf-8"))
    assert set(raw) == {"employees", "incidents"}
    assert json.loads(raw["incidents"])[0]["employeeId"] == "e1"


def test_auto_backup_keeps_previous_state():
    storage = MemoryStorage()
    store = AttendanceStore(storage, auto_backup_default=True)
    emp, inc = _sample()

    store.save([emp], [])
    store.save([emp], [inc])

    snapshot = store.auto_backup()
    assert snapshot is not None
    assert snapshot.employees == [emp]
    assert snapshot.incidents == []
    assert snapshot.taken_at is not None
    assert storage.get_item("auto-backup-timestamp")


def test_auto_backup_can_be_switched_off():
    storage = MemoryStorage()
    store = AttendanceStore(storage, auto_backup_default=True)
    store.set_auto_backup_enabled(False)

    store.save([], [])

    assert store.auto_backup_enabled() is False
    assert store.auto_backup() is None
    assert storage.get_item("auto-backup-enabled") == "false"


def test_corrupt_stored_list_is_reported():
    store = AttendanceStore(MemoryStorage({"employees": "{not json"}))

    with pytest.raises(BackupFormatError):
        store.load()


def test_codec_accepts_older_record_shapes():
    emp = employee_from_dict({"id": 7, "first": "Dana", "last": "Whitfield", "center": "Beachwood"})
    inc = incident_from_dict({"id": 9, "employeeId": 7, "date": "2025-02-03T10:00:00.000Z", "reason": "Late Arrival", "pts": 2})
    derived = incident_from_dict({"id": 10, "employeeId": "7", "date": "2025-02-04", "type": "Unnotified Absence"})

    assert emp.employee_id == "7"
    assert emp.name == "Dana Whitfield"
    assert emp.notifications == ()
    assert inc.employee_id == "7"
    assert inc.incident_date == date(2025, 2, 3)
    assert inc.points == 2
    assert derived.points == 10


def test_codec_rejects_records_without_dates():
    with pytest.raises(BackupFormatError):
        incident_from_dict({"id": 1, "employeeId": "e1", "type": "Late Arrival"})


def test_decode_tolerates_missing_sections():
    assert decode_document({"employees": "nope"}) == ([], [])
