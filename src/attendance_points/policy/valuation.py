from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..core.constants import ILLNESS_OCCURRENCE_POINTS
from ..core.enums import IncidentType
from ..incidents.model import Incident
from .grouping import group_illness_runs

POINT_VALUES: dict[IncidentType, int] = {
    IncidentType.UNNOTIFIED_ABSENCE: 10,
    IncidentType.LATE_ARRIVAL: 2,
    IncidentType.EARLY_DEPARTURE: 2,
    IncidentType.PLANNED_ABSENCE: 4,
    IncidentType.ILLNESS: ILLNESS_OCCURRENCE_POINTS,
}


def point_value_for(incident_type: Optional[str], custom_points: Optional[int] = None) -> int:
    """Base point value of an incident type.

    A caller-supplied value always wins (Other, Manual Adjustment, or an
    explicit override). Unknown types are worth 0.
    """
    if custom_points is not None:
        return int(custom_points)
    kind = IncidentType.parse(incident_type)
    if kind is None:
        return 0
    return POINT_VALUES.get(kind, 0)


def incidents_for(employee_id: str, incidents: Iterable[Incident]) -> list[Incident]:
    return [i for i in incidents if i.employee_id == employee_id]


def raw_points(incidents: Sequence[Incident]) -> int:
    """illness occurrences x 4 + sum of stored points of everything else."""
    illness = [i for i in incidents if i.is_illness]
    others = [i for i in incidents if not i.is_illness]

    illness_points = len(group_illness_runs(illness)) * ILLNESS_OCCURRENCE_POINTS
    other_points = sum(int(i.points) for i in others)
    return illness_points + other_points


def calculate_points(incidents: Sequence[Incident]) -> int:
    """Total points for one employee's incident history, floored at zero."""
    return max(raw_points(incidents), 0)


def clamp_adjustment(current: int, delta: int) -> int:
    """Manual adjustments never drive a total below zero."""
    return max(0, int(current) + int(delta))


def effective_adjustment(current: int, delta: int) -> int:
    """The delta actually applied so that current + delta stays >= 0."""
    return clamp_adjustment(current, delta) - max(int(current), 0)


def rebalance_adjustments(incidents: Sequence[Incident]) -> list[Incident]:
    """Shrink negative manual adjustments until the unfloored total is >= 0.

    Takes one employee's incidents. The most recent adjustments give way
    first; an adjustment never flips to a positive value.
    """
    deficit = -raw_points(incidents)
    if deficit <= 0:
        return list(incidents)

    negatives = sorted(
        (i for i in incidents if i.kind is IncidentType.ADJUSTMENT and i.points < 0),
        key=lambda i: i.incident_date,
        reverse=True,
    )
    shrunk: dict[str, Incident] = {}
    for adj in negatives:
        if deficit <= 0:
            break
        give = min(-adj.points, deficit)
        shrunk[adj.incident_id] = replace(adj, points=adj.points + give)
        deficit -= give
    return [shrunk.get(i.incident_id, i) for i in incidents]
