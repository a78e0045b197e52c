"""
Central data model definitions used across the project.

This module defines the canonical structure of courses, curricula and plans so that:
- the planning core only ever sees course ids and the prerequisite structure
- loading, reporting and export share the same field names
- a stalled planning run is a normal value the caller can inspect
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Collection, Hashable, List, Mapping, Optional, Sequence, Tuple, Union

CourseId = Hashable

# course id -> ordered groups; AND across groups, OR inside a group
PrerequisiteStructure = Mapping[CourseId, Sequence[Collection[CourseId]]]


class InvalidCapacity(ValueError):
    """
    Raised when max courses per semester is not a positive integer.
    """


class CurriculumError(ValueError):
    """
    Raised when a curriculum document cannot be turned into a Curriculum.
    """


@dataclass(frozen=True)
class Course:
    """
    Represents one course of a curriculum (metadata + prerequisite groups).
    """

    course_id: CourseId
    name: str
    credits: int = 3
    prerequisites: Tuple[Tuple[CourseId, ...], ...] = ()


@dataclass
class Curriculum:
    """
    A named, ordered list of courses.

    The order of `courses` is the enumeration order used by the scheduler.
    Courses are read-only once the curriculum is built; the id index is
    created once so per-row lookups in reports stay cheap.
    """

    name: str
    courses: List[Course] = field(default_factory=list)
    _by_id: dict[CourseId, Course] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._by_id = {c.course_id: c for c in self.courses}

    @property
    def universe(self) -> List[CourseId]:
        return [c.course_id for c in self.courses]

    @property
    def prerequisites(self) -> dict[CourseId, Tuple[Tuple[CourseId, ...], ...]]:
        return {c.course_id: c.prerequisites for c in self.courses}

    @property
    def course_by_id(self) -> dict[CourseId, Course]:
        return self._by_id

    def get(self, course_id: CourseId) -> Optional[Course]:
        return self._by_id.get(course_id)


@dataclass
class Plan:
    """
    Ordered semesters, each an ordered list of course ids.
    """

    semesters: List[List[CourseId]] = field(default_factory=list)

    @property
    def semester_count(self) -> int:
        return len(self.semesters)

    @property
    def course_count(self) -> int:
        return sum(len(s) for s in self.semesters)

    def semester_of(self, course_id: CourseId) -> Optional[int]:
        """
        Return the 1-based semester number of a course, or None if it is not planned.
        """
        for i, semester in enumerate(self.semesters, start=1):
            if course_id in semester:
                return i
        return None


@dataclass
class UnsatisfiableGraph:
    """
    Terminal outcome of a planning run whose frontier became empty
    while courses were still unscheduled (cycle, empty group, or a
    reference to a course that does not exist).
    """

    partial: Plan
    scheduled_count: int
    total_count: int
    remaining: List[CourseId] = field(default_factory=list)


PlanResult = Union[Plan, UnsatisfiableGraph]
