"""
Semester scheduling.

Leveled topological planning with a per-semester capacity:

    while courses remain:
        frontier = all unscheduled courses that are eligible now
        if frontier is empty -> stalled
        take the first `max_per_semester` of the frontier as the next semester

The frontier is recomputed from scratch every semester. There is no
look-ahead and no backtracking: a course that enters a semester stays there.
"""

from __future__ import annotations

from typing import Any, Iterable

from semplan.eligibility import is_eligible
from semplan.model import CourseId, InvalidCapacity, Plan, PlanResult, PrerequisiteStructure, UnsatisfiableGraph


def validate_capacity(max_per_semester: Any) -> int:
    """
    Return `max_per_semester` if it is a positive int, else raise InvalidCapacity.
    """
    # bool is an int subclass, but True is not a capacity
    if isinstance(max_per_semester, bool) or not isinstance(max_per_semester, int):
        raise InvalidCapacity(f"max courses per semester must be an integer, got {max_per_semester!r}")
    if max_per_semester < 1:
        raise InvalidCapacity(f"max courses per semester must be at least 1, got {max_per_semester}")
    return max_per_semester


def _ordered_unique(universe: Iterable[CourseId]) -> list[CourseId]:
    seen: set[CourseId] = set()
    out: list[CourseId] = []
    for cid in universe:
        if cid not in seen:
            seen.add(cid)
            out.append(cid)
    return out


def eligible_frontier(
    universe: Iterable[CourseId],
    prerequisites: PrerequisiteStructure,
    scheduled: set[CourseId],
) -> list[CourseId]:
    """
    All unscheduled courses of `universe` that are eligible now, in universe order.
    """
    return [
        cid
        for cid in universe
        if cid not in scheduled and is_eligible(cid, prerequisites, scheduled)
    ]


def plan_semesters(
    universe: Iterable[CourseId],
    prerequisites: PrerequisiteStructure,
    max_per_semester: int,
) -> PlanResult:
    """
    Plan every course of `universe` into semesters of at most `max_per_semester` courses.

    Returns a Plan when all courses were scheduled, or an UnsatisfiableGraph
    carrying the partial plan when no further course can become eligible.
    Raises InvalidCapacity before planning if the capacity is not a positive int.
    """
    validate_capacity(max_per_semester)

    courses = _ordered_unique(universe)
    total = len(courses)

    scheduled: set[CourseId] = set()
    plan = Plan()

    while len(scheduled) < total:
        frontier = eligible_frontier(courses, prerequisites, scheduled)

        if not frontier:
            remaining = [cid for cid in courses if cid not in scheduled]
            return UnsatisfiableGraph(
                partial=plan,
                scheduled_count=len(scheduled),
                total_count=total,
                remaining=remaining,
            )

        semester = frontier[:max_per_semester]
        scheduled.update(semester)
        plan.semesters.append(semester)

    return plan


def compare_capacities(
    universe: Iterable[CourseId],
    prerequisites: PrerequisiteStructure,
    capacities: Iterable[int],
) -> list[tuple[int, PlanResult]]:
    """
    Run one independent planning pass per capacity value.

    All capacities are validated before any planning starts.
    """
    caps = [validate_capacity(c) for c in capacities]
    courses = _ordered_unique(universe)
    return [(cap, plan_semesters(courses, prerequisites, cap)) for cap in caps]
