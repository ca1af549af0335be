from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import IncidentType


@dataclass(frozen=True)
class Incident:
    """Domain entity: a dated attendance policy violation or adjustment.

    The point value is computed once when the incident is recorded and
    stored with it.
    """

    incident_id: str
    employee_id: str
    incident_date: date
    incident_type: str
    points: int
    notes: Optional[str] = None

    @property
    def kind(self) -> Optional[IncidentType]:
        return IncidentType.parse(self.incident_type)

    @property
    def is_illness(self) -> bool:
        return self.kind is IncidentType.ILLNESS

    @property
    def is_ncns(self) -> bool:
        return self.kind is IncidentType.UNNOTIFIED_ABSENCE
