"""
Eligibility evaluation.

A course may be taken once every prerequisite group has at least one
member among the already scheduled courses:

    all(any(p in scheduled for p in group) for group in groups)

Missing entries and empty group sequences mean "no prerequisites".
An empty group can never be satisfied.
"""

from __future__ import annotations

from typing import AbstractSet, Any

from semplan.model import CourseId, PrerequisiteStructure


def _group_satisfied(group: Any, scheduled: AbstractSet[CourseId]) -> bool:
    for prereq in group:
        if prereq in scheduled:
            return True
    return False


def is_eligible(
    course_id: CourseId,
    prerequisites: PrerequisiteStructure,
    scheduled: AbstractSet[CourseId],
) -> bool:
    """
    Decide whether `course_id` can be scheduled given the `scheduled` set.

    Unknown course ids have no entry and are therefore eligible.
    """
    groups = prerequisites.get(course_id)
    if not groups:
        return True

    for group in groups:
        # first unsatisfied group decides
        if not _group_satisfied(group, scheduled):
            return False

    return True


def unsatisfied_groups(
    course_id: CourseId,
    prerequisites: PrerequisiteStructure,
    scheduled: AbstractSet[CourseId],
) -> list[tuple[CourseId, ...]]:
    """
    Return every prerequisite group of `course_id` that has no scheduled member.

    Used for diagnostics when planning stalls. An empty result means eligible.
    """
    groups = prerequisites.get(course_id) or ()
    return [tuple(group) for group in groups if not _group_satisfied(group, scheduled)]
