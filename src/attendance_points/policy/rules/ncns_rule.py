from __future__ import annotations

from ...core.enums import CorrectiveAction
from .base import OverrideRule, RuleContext


class NoCallNoShowRule(OverrideRule):
    """One NCNS in the window turns a verbal warning into a written one;
    two or more mean termination whatever the points say."""

    def apply(self, *, base: CorrectiveAction, context: RuleContext) -> CorrectiveAction:
        if context.ncns_in_window >= 2:
            return CorrectiveAction.TERMINATION_MULTIPLE_NCNS
        if context.ncns_in_window == 1 and base is CorrectiveAction.VERBAL_WARNING:
            return CorrectiveAction.WRITTEN_WARNING_NCNS
        return base
