from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...core.enums import CorrectiveAction


@dataclass(frozen=True)
class RuleContext:
    points: int
    ncns_in_window: int
    today: date
    hire_date: Optional[date] = None
    probation_ncns: int = 0


class OverrideRule(ABC):
    """Strategy Pattern: adjust the threshold recommendation after lookup."""

    @abstractmethod
    def apply(self, *, base: CorrectiveAction, context: RuleContext) -> CorrectiveAction:
        raise NotImplementedError
