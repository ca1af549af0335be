from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Notification:
    """One corrective-action notice delivered to an employee."""

    action: str
    notified_on: date
    points_at_time: int
    remark: str = ""


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object; the policy engine only reads it.
    """

    employee_id: str
    name: str
    position: str = ""
    center: str = ""
    hire_date: Optional[date] = None
    notifications: tuple[Notification, ...] = field(default_factory=tuple)
    notification_cleared: bool = False
    last_notified: Optional[date] = None

    @property
    def last_name(self) -> str:
        return last_name_of(self.name)


def last_name_of(full_name: str) -> str:
    """'John A. Smith' -> 'Smith'."""
    parts = (full_name or "").split()
    return parts[-1] if parts else ""


def sort_key(employee: Employee) -> tuple[str, str]:
    return (employee.last_name.lower(), employee.name.lower())
