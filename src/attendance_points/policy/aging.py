from __future__ import annotations

from datetime import date

from ..core.constants import GOOD_BEHAVIOR_DAYS

REMOVE_LABEL = "Remove"
GOOD_BEHAVIOR_LABEL = "Remove for Good Behavior"


def is_eligible_for_good_behavior_removal(incident_date: date, today: date, *, days: int = GOOD_BEHAVIOR_DAYS) -> bool:
    return (today - incident_date).days > days


def removal_label(incident_date: date, today: date) -> str:
    """Label of the manual delete action; nothing is deleted automatically."""
    if is_eligible_for_good_behavior_removal(incident_date, today):
        return GOOD_BEHAVIOR_LABEL
    return REMOVE_LABEL
