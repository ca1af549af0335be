from __future__ import annotations

from enum import Enum
from typing import Optional


class IncidentType(str, Enum):
    """Closed vocabulary of attendance incidents."""

    UNNOTIFIED_ABSENCE = "Unnotified Absence"
    LATE_ARRIVAL = "Late Arrival"
    EARLY_DEPARTURE = "Early Departure"
    PLANNED_ABSENCE = "Planned Absence"
    ILLNESS = "Unexpected Illness/Last-Minute Emergency"
    OTHER = "Other"
    ADJUSTMENT = "Manual Adjustment"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["IncidentType"]:
        """Map a stored label (or one of its older spellings) to a type.

        Free text outside the vocabulary returns None.
        """
        if not value:
            return None
        label = value.strip()
        try:
            return cls(label)
        except ValueError:
            return _ALIASES.get(label.lower())


_ALIASES = {
    "no-call/no-show": IncidentType.UNNOTIFIED_ABSENCE,
    "no call/no show": IncidentType.UNNOTIFIED_ABSENCE,
    "ncns": IncidentType.UNNOTIFIED_ABSENCE,
    "unnotified absence / no-call/no-show": IncidentType.UNNOTIFIED_ABSENCE,
    "planned absence (<24h notice)": IncidentType.PLANNED_ABSENCE,
    "unexpected illness": IncidentType.ILLNESS,
    "illness": IncidentType.ILLNESS,
    "other/custom": IncidentType.OTHER,
    "adjustment": IncidentType.ADJUSTMENT,
}


class CorrectiveAction(str, Enum):
    """Disciplinary labels recommended by the policy table."""

    NONE = "No Action Required"
    VERBAL_WARNING = "Verbal Warning"
    WRITTEN_WARNING = "Written Warning"
    WRITTEN_WARNING_NCNS = "Written Warning (No-Call/No-Show)"
    FINAL_WARNING = "Final Warning (PIP)"
    TERMINATION = "Termination"
    TERMINATION_MULTIPLE_NCNS = "Termination (Multiple No-Call/No-Shows)"
    PROBATION_REMOVAL = "Removal from Schedule (Probationary No-Call/No-Show)"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {
    CorrectiveAction.NONE: 0,
    CorrectiveAction.VERBAL_WARNING: 1,
    CorrectiveAction.WRITTEN_WARNING: 2,
    CorrectiveAction.WRITTEN_WARNING_NCNS: 2,
    CorrectiveAction.FINAL_WARNING: 3,
    CorrectiveAction.TERMINATION: 4,
    CorrectiveAction.TERMINATION_MULTIPLE_NCNS: 4,
    CorrectiveAction.PROBATION_REMOVAL: 4,
}
