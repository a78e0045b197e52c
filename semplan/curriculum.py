"""
Curriculum loading.

A curriculum is a JSON document of the form:

    {
      "name": "Systems Engineering",
      "courses": [
        {"id": 1, "name": "Calculus I", "credits": 4, "prerequisites": []},
        {"id": 5, "name": "Calculus II", "credits": 4, "prerequisites": [[1]]},
        ...
      ]
    }

Each entry in "prerequisites" is a group of alternatives (OR); all groups
must be satisfied (AND). The document order of "courses" is the order in
which the scheduler considers courses.

Sources can be local files or http(s) URLs. Without a source, the sample
curriculum bundled in semplan/data/ is used.
"""

from __future__ import annotations

import json
from collections.abc import Hashable
from pathlib import Path
from typing import Any

import requests

from semplan.model import Course, Curriculum, CurriculumError


def _default_curriculum_path() -> Path:
    """
    Return the path of the sample curriculum shipped inside the package.

    A function instead of a constant, so tests can point elsewhere.
    """
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "sample_curriculum.json"


def _is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


def _parse_course(raw: Any, index: int) -> Course:
    if not isinstance(raw, dict):
        raise CurriculumError(f"course #{index} is not an object")

    if "id" not in raw:
        raise CurriculumError(f"course #{index} has no 'id'")
    course_id = raw["id"]
    if not isinstance(course_id, Hashable) or isinstance(course_id, bool) or course_id is None:
        raise CurriculumError(f"course #{index} has an invalid id: {course_id!r}")

    name = str(raw.get("name") or "").strip() or str(course_id)

    credits = raw.get("credits", 3)
    if isinstance(credits, bool) or not isinstance(credits, int) or credits < 0:
        raise CurriculumError(f"course {course_id!r}: credits must be a non-negative integer")

    # only a missing key or null means "no prerequisites"
    groups_raw = raw.get("prerequisites")
    if groups_raw is None:
        groups_raw = []
    if not isinstance(groups_raw, list):
        raise CurriculumError(f"course {course_id!r}: prerequisites must be a list of groups")

    groups: list[tuple[Any, ...]] = []
    for group in groups_raw:
        if not isinstance(group, list):
            raise CurriculumError(f"course {course_id!r}: every prerequisite group must be a list")
        if not all(isinstance(ref, Hashable) for ref in group):
            raise CurriculumError(f"course {course_id!r}: prerequisite ids must be scalars")
        groups.append(tuple(group))

    return Course(course_id=course_id, name=name, credits=credits, prerequisites=tuple(groups))


def parse_curriculum(data: Any) -> Curriculum:
    """
    Build a Curriculum from an already decoded JSON document.

    References to unknown courses are kept as-is: they make the owning
    course unschedulable, which the scheduler reports as a stall.
    """
    if not isinstance(data, dict):
        raise CurriculumError("curriculum document must be a JSON object")

    courses_raw = data.get("courses")
    if not isinstance(courses_raw, list):
        raise CurriculumError("curriculum document needs a 'courses' list")

    courses: list[Course] = []
    seen: set[Any] = set()
    for i, raw in enumerate(courses_raw, start=1):
        course = _parse_course(raw, i)
        if course.course_id in seen:
            raise CurriculumError(f"duplicate course id: {course.course_id!r}")
        seen.add(course.course_id)
        courses.append(course)

    name = str(data.get("name") or "").strip() or "Curriculum"
    return Curriculum(name=name, courses=courses)


def _fetch_json(url: str) -> Any:
    resp = requests.get(url, timeout=30)
    resp.raise_for_status()
    try:
        return resp.json()
    except ValueError as exc:
        raise CurriculumError(f"invalid JSON from {url}: {exc}") from exc


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CurriculumError(f"curriculum file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CurriculumError(f"cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CurriculumError(f"invalid JSON in {path}: {exc}") from exc


def load_curriculum(source: str | Path | None = None) -> Curriculum:
    """
    Load a curriculum from a file path or an http(s) URL.

    Network failures are raised as requests.RequestException,
    everything else that is wrong with the document as CurriculumError.
    """
    if source is None:
        return parse_curriculum(_read_json(_default_curriculum_path()))

    if isinstance(source, str) and _is_url(source.strip()):
        return parse_curriculum(_fetch_json(source.strip()))

    return parse_curriculum(_read_json(Path(source)))


def find_dangling_references(curriculum: Curriculum) -> list[tuple[Any, Any]]:
    """
    Return (course_id, missing_prereq_id) pairs for prerequisites not in the curriculum.
    """
    known = set(curriculum.universe)
    out: list[tuple[Any, Any]] = []
    for course in curriculum.courses:
        for group in course.prerequisites:
            for ref in group:
                if ref not in known:
                    out.append((course.course_id, ref))
    return out
