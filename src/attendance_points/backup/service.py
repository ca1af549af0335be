from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from ..common.datetime_utils import date_stamp
from ..core.constants import BACKUP_FILENAME_PATTERN
from ..core.exceptions import BackupFormatError, ValidationError
from ..policy.engine import PolicyEngine
from ..storage.codec import decode_document, encode_document
from ..storage.store import AttendanceStore
from .csv_export import export_detailed_csv, export_incidents_csv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestoreResult:
    employees: int
    incidents: int


@dataclass(frozen=True)
class AutoBackupStatus:
    enabled: bool
    taken_at: Optional[datetime]
    employees: int
    incidents: int


def backup_filename(today: date) -> str:
    return BACKUP_FILENAME_PATTERN.format(stamp=date_stamp(today))


def parse_backup(content: Union[str, bytes]) -> tuple[list, list]:
    """Parse a whole backup document before anything is touched.

    Raises BackupFormatError for anything that is not a readable backup.
    """
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8-sig")
        except UnicodeDecodeError:
            raise BackupFormatError("Backup file is not UTF-8 text")
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise BackupFormatError(f"Invalid backup file: {e.msg}")
    return decode_document(data)


class BackupService:
    """Use case: JSON backup download, restore, CSV export and the rolling auto-backup."""

    def __init__(self, store: AttendanceStore, engine: PolicyEngine):
        self._store = store
        self._engine = engine

    def export_json(self) -> str:
        employees, incidents = self._store.load()
        return json.dumps(encode_document(employees, incidents), indent=2, ensure_ascii=False)

    def export_csv(self, *, today: date, detailed: bool = False) -> str:
        employees, incidents = self._store.load()
        if detailed:
            return export_detailed_csv(employees, incidents, engine=self._engine, today=today)
        return export_incidents_csv(employees, incidents)

    def restore(self, content: Union[str, bytes]) -> RestoreResult:
        try:
            employees, incidents = parse_backup(content)
        except BackupFormatError as e:
            logger.warning("backup rejected: %s", e)
            raise

        self._store.save(employees, incidents)
        logger.info("restored backup: %d employees, %d incidents", len(employees), len(incidents))
        return RestoreResult(employees=len(employees), incidents=len(incidents))

    def auto_backup_status(self) -> AutoBackupStatus:
        snapshot = self._store.auto_backup()
        return AutoBackupStatus(
            enabled=self._store.auto_backup_enabled(),
            taken_at=snapshot.taken_at if snapshot else None,
            employees=len(snapshot.employees) if snapshot else 0,
            incidents=len(snapshot.incidents) if snapshot else 0,
        )

    def set_auto_backup(self, enabled: bool) -> None:
        self._store.set_auto_backup_enabled(enabled)
        logger.info("auto-backup %s", "enabled" if enabled else "disabled")

    def restore_auto_backup(self) -> RestoreResult:
        snapshot = self._store.auto_backup()
        if snapshot is None:
            raise ValidationError("No auto-backup available")
        self._store.save(snapshot.employees, snapshot.incidents)
        logger.info(
            "restored auto-backup from %s: %d employees, %d incidents",
            snapshot.taken_at,
            len(snapshot.employees),
            len(snapshot.incidents),
        )
        return RestoreResult(employees=len(snapshot.employees), incidents=len(snapshot.incidents))
