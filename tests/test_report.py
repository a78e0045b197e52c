"""
Tests for plan rendering.

Rich output is captured by giving the render functions a Console
that writes into a StringIO.
"""

import io
import unittest

from rich.console import Console

from semplan.curriculum import parse_curriculum
from semplan.report import plan_summary, render_comparison, render_plan, render_stall
from semplan.scheduler import compare_capacities, plan_semesters

CURRICULUM = parse_curriculum(
    {
        "name": "Tiny",
        "courses": [
            {"id": 1, "name": "Calculus", "credits": 4},
            {"id": 2, "name": "Algebra", "credits": 3},
            {"id": 3, "name": "Physics", "credits": 5, "prerequisites": [[1], [2]]},
        ],
    }
)

CYCLIC = parse_curriculum(
    {
        "name": "Broken",
        "courses": [
            {"id": 1, "name": "Start"},
            {"id": 2, "name": "Chicken", "prerequisites": [[3]]},
            {"id": 3, "name": "Egg", "prerequisites": [[2, 42]]},
        ],
    }
)


def _console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=120, color_system=None), buf


class TestReport(unittest.TestCase):
    def test_summary_counts_credits(self) -> None:
        plan = plan_semesters(CURRICULUM.universe, CURRICULUM.prerequisites, 2)
        self.assertEqual(plan_summary(plan, CURRICULUM), {"semesters": 2, "courses": 3, "credits": 12})

    def test_render_plan_lists_semesters_and_summary(self) -> None:
        plan = plan_semesters(CURRICULUM.universe, CURRICULUM.prerequisites, 2)
        console, buf = _console()
        render_plan(plan, CURRICULUM, console)
        out = buf.getvalue()
        self.assertIn("Semester 1", out)
        self.assertIn("Semester 2", out)
        self.assertIn("Physics", out)
        self.assertIn("Total semesters: 2", out)
        self.assertIn("Estimated credits: 12", out)

    def test_render_stall_shows_progress_and_blockers(self) -> None:
        result = plan_semesters(CYCLIC.universe, CYCLIC.prerequisites, 3)
        console, buf = _console()
        render_stall(result, CYCLIC, console)
        out = buf.getvalue()
        self.assertIn("Courses scheduled: 1/3", out)
        self.assertIn("Chicken", out)
        self.assertIn("2 or 42", out)

    def test_render_comparison(self) -> None:
        rows = compare_capacities(CURRICULUM.universe, CURRICULUM.prerequisites, [1, 3])
        rows += compare_capacities(CYCLIC.universe, CYCLIC.prerequisites, [2])
        console, buf = _console()
        render_comparison(rows, console)
        out = buf.getvalue()
        self.assertIn("Scenario comparison", out)
        self.assertIn("stalled (1/3)", out)


if __name__ == "__main__":
    unittest.main()
