"""
JSON export of a planning result.

Output layout:

    {
      "status": "completed" | "stalled",
      "scheduled": 24,
      "total": 24,
      "semesters": [[{"id": 1, "name": "...", "credits": 4}, ...], ...]
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from semplan.model import Curriculum, PlanResult, UnsatisfiableGraph


def _course_entry(course_id: Any, curriculum: Optional[Curriculum]) -> dict[str, Any]:
    course = curriculum.get(course_id) if curriculum is not None else None
    return {
        "id": course_id,
        "name": course.name if course else None,
        "credits": course.credits if course else None,
    }


def plan_to_dict(result: PlanResult, curriculum: Optional[Curriculum] = None) -> dict[str, Any]:
    """
    Convert a Plan or UnsatisfiableGraph into the JSON-ready layout shown above.

    Without a curriculum, "name" and "credits" are None.
    """
    if isinstance(result, UnsatisfiableGraph):
        plan = result.partial
        status = "stalled"
        scheduled, total = result.scheduled_count, result.total_count
    else:
        plan = result
        status = "completed"
        scheduled = total = result.course_count

    return {
        "status": status,
        "scheduled": scheduled,
        "total": total,
        "semesters": [[_course_entry(cid, curriculum) for cid in semester] for semester in plan.semesters],
    }


def export_plan_to_json(
    result: PlanResult, out_path: str | Path, curriculum: Optional[Curriculum] = None
) -> int:
    """
    Write the plan to `out_path`. Returns the number of exported courses.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    payload = plan_to_dict(result, curriculum)
    out.write_text(json.dumps(payload, indent=2, ensure_ascii=False, default=str), encoding="utf-8")

    return sum(len(s) for s in payload["semesters"])
