"""Example: use the policy engine directly (no Flask, no storage).

The engine takes the data in and hands derived values back.
"""

from datetime import date

from attendance_points.core.enums import IncidentType
from attendance_points.employees.model import Employee
from attendance_points.incidents.model import Incident
from attendance_points.policy import PolicyEngine
from attendance_points.policy.valuation import point_value_for


def main():
    today = date(2025, 6, 30)
    employee = Employee(employee_id="e1", name="Dana Whitfield", center="Beachwood")

    def incident(n: int, day: date, kind: IncidentType) -> Incident:
        return Incident(
            incident_id=f"i{n}",
            employee_id="e1",
            incident_date=day,
            incident_type=kind.value,
            points=point_value_for(kind.value),
        )

    incidents = [
        incident(1, date(2025, 6, 2), IncidentType.ILLNESS),
        incident(2, date(2025, 6, 3), IncidentType.ILLNESS),
        incident(3, date(2025, 6, 10), IncidentType.LATE_ARRIVAL),
    ]

    engine = PolicyEngine()
    print(engine.recommend("e1", incidents, today=today, employees=[employee]))
    print([a.action.value for a in engine.alerts([employee], incidents, today=today)])


if __name__ == "__main__":
    main()
