from __future__ import annotations

from dataclasses import dataclass

from .rules.base import OverrideRule
from .rules.ncns_rule import NoCallNoShowRule
from .rules.probation_rule import ProbationNoCallNoShowRule


@dataclass
class OverrideRuleFactory:
    """Factory Pattern: build the ordered override chain from settings."""

    enforce_probation_ncns: bool = False

    def build(self) -> list[OverrideRule]:
        rules: list[OverrideRule] = [NoCallNoShowRule()]
        if self.enforce_probation_ncns:
            rules.append(ProbationNoCallNoShowRule())
        return rules
