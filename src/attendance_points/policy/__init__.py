"""Attendance policy engine.

Pure functions over (employees, incidents, today). Nothing here reads the
clock, touches storage or mutates its inputs.
"""

from .engine import PolicyEngine, Recommendation, Standing

__all__ = ["PolicyEngine", "Recommendation", "Standing"]
