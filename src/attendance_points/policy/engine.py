from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..core.constants import DEFAULT_PROBATION_DAYS, NCNS_WINDOW_DAYS
from ..core.enums import CorrectiveAction, IncidentType
from ..employees.model import Employee, sort_key
from ..incidents.model import Incident
from .alerts import already_notified, has_outstanding_alert
from .factory import OverrideRuleFactory
from .recommendation import THRESHOLDS, action_for_points
from .rules.base import OverrideRule, RuleContext
from .valuation import POINT_VALUES, calculate_points, incidents_for


@dataclass(frozen=True)
class Recommendation:
    action: CorrectiveAction
    points: int


@dataclass(frozen=True)
class Alert:
    employee: Employee
    action: CorrectiveAction
    points: int
    previously_notified: bool


@dataclass(frozen=True)
class Standing:
    """Per-employee read model consumed by the presentation layer."""

    employee: Employee
    points: int
    action: CorrectiveAction
    ncns_count: int
    alert: bool
    previously_notified: bool


class PolicyEngine:
    """Point accumulation and corrective-action policy.

    Every method takes the data it works on plus an explicit ``today``;
    nothing is retained between calls.
    """

    def __init__(
        self,
        *,
        rules: Optional[Sequence[OverrideRule]] = None,
        enforce_probation_ncns: bool = False,
        probation_days: int = DEFAULT_PROBATION_DAYS,
        ncns_window_days: int = NCNS_WINDOW_DAYS,
    ):
        if rules is None:
            rules = OverrideRuleFactory(enforce_probation_ncns=enforce_probation_ncns).build()
        self._rules = list(rules)
        self._probation_days = int(probation_days)
        self._ncns_window_days = int(ncns_window_days)

    def points_for(self, employee_id: str, incidents: Iterable[Incident]) -> int:
        return calculate_points(incidents_for(employee_id, incidents))

    def count_ncns(self, employee_id: str, incidents: Iterable[Incident], *, today: date) -> int:
        """No-call/no-shows within the trailing window ending at ``today``."""
        window_start = today - timedelta(days=self._ncns_window_days)
        return sum(
            1
            for i in incidents_for(employee_id, incidents)
            if i.is_ncns and i.incident_date >= window_start
        )

    def _count_probation_ncns(self, employee_id: str, incidents: Iterable[Incident], hire_date: Optional[date]) -> int:
        if hire_date is None:
            return 0
        probation_end = hire_date + timedelta(days=self._probation_days)
        return sum(
            1
            for i in incidents_for(employee_id, incidents)
            if i.is_ncns and hire_date <= i.incident_date < probation_end
        )

    def recommend(
        self,
        employee_id: str,
        incidents: Sequence[Incident],
        *,
        today: date,
        employees: Iterable[Employee] = (),
    ) -> Recommendation:
        points = self.points_for(employee_id, incidents)
        action = action_for_points(points)

        employee = next((e for e in employees if e.employee_id == employee_id), None)
        hire_date = employee.hire_date if employee else None
        context = RuleContext(
            points=points,
            ncns_in_window=self.count_ncns(employee_id, incidents, today=today),
            today=today,
            hire_date=hire_date,
            probation_ncns=self._count_probation_ncns(employee_id, incidents, hire_date),
        )
        for rule in self._rules:
            action = rule.apply(base=action, context=context)
        return Recommendation(action=action, points=points)

    def has_alert(self, employee: Employee, incidents: Sequence[Incident], *, today: date) -> bool:
        rec = self.recommend(employee.employee_id, incidents, today=today, employees=[employee])
        return has_outstanding_alert(employee, rec.action)

    def standing(self, employee: Employee, incidents: Sequence[Incident], *, today: date) -> Standing:
        rec = self.recommend(employee.employee_id, incidents, today=today, employees=[employee])
        return Standing(
            employee=employee,
            points=rec.points,
            action=rec.action,
            ncns_count=self.count_ncns(employee.employee_id, incidents, today=today),
            alert=has_outstanding_alert(employee, rec.action),
            previously_notified=already_notified(employee, rec.action),
        )

    def alerts(self, employees: Iterable[Employee], incidents: Sequence[Incident], *, today: date) -> list[Alert]:
        out: list[Alert] = []
        for employee in sorted(employees, key=sort_key):
            s = self.standing(employee, incidents, today=today)
            if s.alert:
                out.append(
                    Alert(
                        employee=employee,
                        action=s.action,
                        points=s.points,
                        previously_notified=s.previously_notified,
                    )
                )
        return out

    @staticmethod
    def policy_reference() -> dict:
        """Point values and thresholds as shown on the policy reference card."""
        return {
            "point_values": {t.value: v for t, v in POINT_VALUES.items()},
            "corrective_actions": [
                {"min_points": threshold, "action": action.value} for threshold, action in reversed(THRESHOLDS)
            ],
            "notes": [
                "Consecutive illness days count as a single occurrence.",
                "One no-call/no-show in 12 months escalates a verbal warning to a written warning.",
                "Two or more no-call/no-shows in 12 months mean termination.",
                "Incidents older than 90 days may be removed for good behavior.",
            ],
            "other_types": [IncidentType.OTHER.value, IncidentType.ADJUSTMENT.value],
        }
