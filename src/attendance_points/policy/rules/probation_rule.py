from __future__ import annotations

from ...core.enums import CorrectiveAction
from .base import OverrideRule, RuleContext


class ProbationNoCallNoShowRule(OverrideRule):
    """A single NCNS during the probation period removes the employee from the schedule."""

    def apply(self, *, base: CorrectiveAction, context: RuleContext) -> CorrectiveAction:
        if context.probation_ncns >= 1:
            return CorrectiveAction.PROBATION_REMOVAL
        return base
