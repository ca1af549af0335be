from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import (
    AUTO_BACKUP_ENABLED_KEY,
    AUTO_BACKUP_KEY,
    AUTO_BACKUP_TIMESTAMP_KEY,
    EMPLOYEES_KEY,
    INCIDENTS_KEY,
)
from ..core.exceptions import BackupFormatError
from ..employees.model import Employee
from ..incidents.model import Incident
from .codec import decode_document, employee_to_dict, incident_to_dict
from .local_storage import KeyValueStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AutoBackup:
    taken_at: Optional[datetime]
    employees: list[Employee]
    incidents: list[Incident]


class AttendanceStore:
    """Loads and saves the employee and incident lists.

    Both lists live under the ``employees`` and ``incidents`` keys as JSON
    strings. When auto-backup is on, every save first copies the state it
    is about to overwrite to ``auto-backup``.
    """

    def __init__(self, storage: KeyValueStorage, *, auto_backup_default: bool = False):
        self._storage = storage
        self._auto_backup_default = bool(auto_backup_default)

    def _read_list(self, key: str) -> list:
        raw = self._storage.get_item(key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise BackupFormatError(f"stored {key} are not valid JSON: {e}")
        return data if isinstance(data, list) else []

    def load(self) -> tuple[list[Employee], list[Incident]]:
        return decode_document(
            {
                "employees": self._read_list(EMPLOYEES_KEY),
                "incidents": self._read_list(INCIDENTS_KEY),
            }
        )

    def save(self, employees: Sequence[Employee], incidents: Sequence[Incident]) -> None:
        if self.auto_backup_enabled():
            self._snapshot()

        self._storage.set_item(EMPLOYEES_KEY, json.dumps([employee_to_dict(e) for e in employees], ensure_ascii=False))
        self._storage.set_item(INCIDENTS_KEY, json.dumps([incident_to_dict(i) for i in incidents], ensure_ascii=False))

    def _snapshot(self) -> None:
        previous = {
            "employees": self._read_list(EMPLOYEES_KEY),
            "incidents": self._read_list(INCIDENTS_KEY),
        }
        taken_at = now_local()
        self._storage.set_item(AUTO_BACKUP_KEY, json.dumps(previous, ensure_ascii=False))
        self._storage.set_item(AUTO_BACKUP_TIMESTAMP_KEY, taken_at.isoformat(timespec="seconds"))
        logger.info(
            "auto-backup taken (%d employees, %d incidents)",
            len(previous["employees"]),
            len(previous["incidents"]),
        )

    def auto_backup_enabled(self) -> bool:
        raw = self._storage.get_item(AUTO_BACKUP_ENABLED_KEY)
        if raw is None:
            return self._auto_backup_default
        return raw.strip().lower() in {"1", "true", "yes", "on"}

    def set_auto_backup_enabled(self, enabled: bool) -> None:
        self._storage.set_item(AUTO_BACKUP_ENABLED_KEY, "true" if enabled else "false")

    def auto_backup(self) -> Optional[AutoBackup]:
        raw = self._storage.get_item(AUTO_BACKUP_KEY)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise BackupFormatError(f"auto-backup is not valid JSON: {e}")
        employees, incidents = decode_document(data)

        stamp = self._storage.get_item(AUTO_BACKUP_TIMESTAMP_KEY)
        taken_at = None
        if stamp:
            try:
                taken_at = datetime.fromisoformat(stamp)
            except ValueError:
                logger.warning("ignoring malformed auto-backup timestamp %r", stamp)
        return AutoBackup(taken_at=taken_at, employees=employees, incidents=incidents)
