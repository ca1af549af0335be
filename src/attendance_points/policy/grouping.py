from __future__ import annotations

from datetime import timedelta
from typing import Sequence

from ..incidents.model import Incident


def group_illness_runs(illness: Sequence[Incident]) -> list[list[Incident]]:
    """Collapse consecutive-day illness incidents into occurrences.

    Incidents are sorted ascending by date. A date exactly one day after
    the previous one extends the current run; anything else, including a
    second incident on the same day, starts a new occurrence.
    """
    ordered = sorted(illness, key=lambda i: i.incident_date)
    groups: list[list[Incident]] = []
    for incident in ordered:
        if groups:
            prev = groups[-1][-1].incident_date
            if incident.incident_date - prev == timedelta(days=1):
                groups[-1].append(incident)
                continue
        groups.append([incident])
    return groups
