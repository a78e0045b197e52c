"""
Unit tests for JSON plan export.

Export contract:
- completed and stalled results are both exported, tagged by "status"
- course names/credits come from the curriculum when one is given
- the return value is the number of exported courses
"""

import json
import tempfile
import unittest
from pathlib import Path

from semplan.curriculum import parse_curriculum
from semplan.export_json import export_plan_to_json
from semplan.scheduler import plan_semesters

CURRICULUM = parse_curriculum(
    {
        "name": "Tiny",
        "courses": [
            {"id": 1, "name": "Calculus", "credits": 4},
            {"id": 2, "name": "Physics", "prerequisites": [[1]]},
            {"id": 3, "name": "Dead end", "prerequisites": [[]]},
        ],
    }
)


class TestExportJSON(unittest.TestCase):
    def test_export_completed_plan(self) -> None:
        result = plan_semesters([1, 2], CURRICULUM.prerequisites, 3)

        with tempfile.TemporaryDirectory() as d:
            out = Path(d) / "nested" / "plan.json"
            n = export_plan_to_json(result, out, CURRICULUM)
            self.assertEqual(n, 2)
            data = json.loads(out.read_text(encoding="utf-8"))

        self.assertEqual(data["status"], "completed")
        self.assertEqual((data["scheduled"], data["total"]), (2, 2))
        self.assertEqual(
            data["semesters"],
            [[{"id": 1, "name": "Calculus", "credits": 4}], [{"id": 2, "name": "Physics", "credits": 3}]],
        )

    def test_export_stalled_plan(self) -> None:
        result = plan_semesters(CURRICULUM.universe, CURRICULUM.prerequisites, 3)

        with tempfile.TemporaryDirectory() as d:
            out = Path(d) / "plan.json"
            n = export_plan_to_json(result, out)
            data = json.loads(out.read_text(encoding="utf-8"))

        self.assertEqual(n, 2)
        self.assertEqual(data["status"], "stalled")
        self.assertEqual((data["scheduled"], data["total"]), (2, 3))
        # no curriculum given -> ids only
        self.assertEqual(data["semesters"][0], [{"id": 1, "name": None, "credits": None}])


if __name__ == "__main__":
    unittest.main()
