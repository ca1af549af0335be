from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .backup.service import BackupService
from .core.constants import DEFAULT_PROBATION_DAYS
from .employees.service import EmployeeService
from .incidents.service import IncidentService
from .policy.engine import PolicyEngine
from .policy.factory import OverrideRuleFactory
from .storage.local_storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from .storage.store import AttendanceStore


@dataclass(frozen=True)
class Container:
    storage: KeyValueStorage
    store: AttendanceStore
    engine: PolicyEngine

    employee_service: EmployeeService
    incident_service: IncidentService
    backup_service: BackupService

    centers: tuple[str, ...]


def build_container(settings: Any, *, storage: KeyValueStorage | None = None) -> Container:
    """Wire storage, policy engine and services from a settings module."""
    if storage is None:
        data_file = getattr(settings, "DATA_FILE", None)
        storage = JsonFileStorage(data_file) if data_file else MemoryStorage()

    store = AttendanceStore(storage, auto_backup_default=bool(getattr(settings, "AUTO_BACKUP_ENABLED", False)))

    rules = OverrideRuleFactory(
        enforce_probation_ncns=bool(getattr(settings, "ENFORCE_PROBATION_NCNS", False)),
    ).build()
    engine = PolicyEngine(
        rules=rules,
        probation_days=int(getattr(settings, "PROBATION_DAYS", DEFAULT_PROBATION_DAYS)),
    )

    centers = tuple(getattr(settings, "CENTERS", ()) or ())
    default_center = getattr(settings, "DEFAULT_CENTER", centers[0] if centers else "")

    return Container(
        storage=storage,
        store=store,
        engine=engine,
        employee_service=EmployeeService(store, engine, default_center=default_center),
        incident_service=IncidentService(store, engine),
        backup_service=BackupService(store, engine),
        centers=centers,
    )
