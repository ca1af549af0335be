from __future__ import annotations

from ..core.enums import CorrectiveAction
from ..employees.model import Employee


def has_outstanding_alert(employee: Employee, action: CorrectiveAction) -> bool:
    """Flag-based alerting: any action other than "No Action Required"
    alerts until the employee's alert is cleared for this cycle."""
    if action is CorrectiveAction.NONE:
        return False
    return not employee.notification_cleared


def already_notified(employee: Employee, action: CorrectiveAction) -> bool:
    """Audit check: has a notice with this exact label been delivered before."""
    return any(n.action == action.value for n in employee.notifications)
