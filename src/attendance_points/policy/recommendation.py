from __future__ import annotations

from ..core.enums import CorrectiveAction

# Highest threshold first; the first match wins.
THRESHOLDS: tuple[tuple[int, CorrectiveAction], ...] = (
    (15, CorrectiveAction.TERMINATION),
    (12, CorrectiveAction.FINAL_WARNING),
    (8, CorrectiveAction.WRITTEN_WARNING),
    (4, CorrectiveAction.VERBAL_WARNING),
)


def action_for_points(points: int) -> CorrectiveAction:
    """Total lookup: every point value maps to some action, zero included."""
    for threshold, action in THRESHOLDS:
        if points >= threshold:
            return action
    return CorrectiveAction.NONE
