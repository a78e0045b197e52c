"""
semplan - semester-by-semester course planning over AND-of-OR prerequisite graphs.
"""

from semplan.eligibility import is_eligible
from semplan.model import InvalidCapacity, Plan, UnsatisfiableGraph
from semplan.scheduler import plan_semesters

__all__ = ["InvalidCapacity", "Plan", "UnsatisfiableGraph", "is_eligible", "plan_semesters"]
