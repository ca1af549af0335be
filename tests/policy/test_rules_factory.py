from datetime import date, timedelta

from attendance_points.core.enums import CorrectiveAction, IncidentType
from attendance_points.employees.model import Employee
from attendance_points.policy.engine import PolicyEngine
from attendance_points.policy.factory import OverrideRuleFactory
from attendance_points.policy.rules.base import RuleContext
from attendance_points.policy.rules.ncns_rule import NoCallNoShowRule
from attendance_points.policy.rules.probation_rule import ProbationNoCallNoShowRule


def test_factory_default_has_only_ncns_rule():
    rules = OverrideRuleFactory().build()

    assert len(rules) == 1
    assert isinstance(rules[0], NoCallNoShowRule)


def test_factory_adds_probation_rule_when_enabled():
    rules = OverrideRuleFactory(enforce_probation_ncns=True).build()

    assert isinstance(rules[-1], ProbationNoCallNoShowRule)


def test_ncns_rule_leaves_other_actions_alone():
    ctx = RuleContext(points=12, ncns_in_window=1, today=date(2025, 1, 1))

    assert NoCallNoShowRule().apply(base=CorrectiveAction.FINAL_WARNING, context=ctx) is CorrectiveAction.FINAL_WARNING


def test_probation_ncns_removes_new_hire_when_enforced(make_incident):
    today = date(2025, 6, 30)
    hire = Employee(employee_id="e1", name="New Hire", hire_date=today - timedelta(days=30))
    incidents = [make_incident("e1", today - timedelta(days=10), IncidentType.UNNOTIFIED_ABSENCE)]

    strict = PolicyEngine(enforce_probation_ncns=True)
    lenient = PolicyEngine()

    assert strict.recommend("e1", incidents, today=today, employees=[hire]).action is CorrectiveAction.PROBATION_REMOVAL
    assert lenient.recommend("e1", incidents, today=today, employees=[hire]).action is CorrectiveAction.WRITTEN_WARNING


def test_ncns_after_probation_is_not_removal(make_incident):
    today = date(2025, 6, 30)
    veteran = Employee(employee_id="e1", name="Old Timer", hire_date=today - timedelta(days=200))
    incidents = [make_incident("e1", today - timedelta(days=10), IncidentType.UNNOTIFIED_ABSENCE)]

    engine = PolicyEngine(enforce_probation_ncns=True)

    assert engine.recommend("e1", incidents, today=today, employees=[veteran]).action is CorrectiveAction.WRITTEN_WARNING
