"""
CLI (Command Line Interface).

Quick terminal commands around the planner, e.g.:

    semplan plan --max 5
    semplan plan --max 4 --out plan.json
    semplan compare --max 3 4 5 6
    semplan eligible --taken 1 2 3
    semplan --curriculum my_curriculum.json check

Note:
- --curriculum accepts a local JSON file or an http(s) URL;
  without it the bundled sample curriculum is used
- Rendering lives in semplan/report.py, planning in semplan/scheduler.py
"""

from __future__ import annotations

import argparse
from collections import defaultdict
from typing import Any

import requests

from semplan.curriculum import find_dangling_references, load_curriculum
from semplan.export_json import export_plan_to_json
from semplan.model import Curriculum, CurriculumError, InvalidCapacity, UnsatisfiableGraph
from semplan.report import render_comparison, render_plan, render_stall
from semplan.scheduler import compare_capacities, eligible_frontier, plan_semesters

DEFAULT_MAX_PER_SEMESTER = 5
DEFAULT_COMPARE_CAPACITIES = [3, 4, 5, 6]

EXIT_STALLED = 3


def _resolve_ids(tokens: list[str], curriculum: Curriculum) -> set[Any]:
    """
    Map ids typed on the command line to the curriculum's ids (compared as strings).
    Unknown ids are kept as plain strings, with a warning.
    Ids sharing a string form (e.g. 1 and "1") all match, with a warning.
    """
    by_text: dict[str, list[Any]] = defaultdict(list)
    for cid in curriculum.universe:
        by_text[str(cid)].append(cid)

    out: set[Any] = set()
    for token in tokens:
        text = token.strip()
        if not text:
            continue
        matches = by_text.get(text)
        if not matches:
            print(f"Warning: course id '{text}' not found in curriculum.")
            out.add(text)
            continue
        if len(matches) > 1:
            print(f"Warning: course id '{text}' is ambiguous ({', '.join(repr(m) for m in matches)}); using all.")
        out.update(matches)
    return out


def _cmd_plan(args: argparse.Namespace, curriculum: Curriculum) -> int:
    """
    Plan the whole curriculum and print it semester by semester.
    """
    result = plan_semesters(curriculum.universe, curriculum.prerequisites, args.max)

    if isinstance(result, UnsatisfiableGraph):
        render_stall(result, curriculum)
    else:
        render_plan(result, curriculum)

    out_path = (args.out or "").strip()
    if out_path:
        n = export_plan_to_json(result, out_path, curriculum)
        print(f"Exported {n} courses to: {out_path}")

    return EXIT_STALLED if isinstance(result, UnsatisfiableGraph) else 0


def _cmd_compare(args: argparse.Namespace, curriculum: Curriculum) -> int:
    """
    Plan once per capacity value and print how many semesters each needs.
    """
    rows = compare_capacities(curriculum.universe, curriculum.prerequisites, args.max)
    render_comparison(rows)
    return 0


def _cmd_eligible(args: argparse.Namespace, curriculum: Curriculum) -> int:
    """
    List courses that can be taken next, given the courses already taken.
    """
    taken = _resolve_ids(args.taken or [], curriculum)
    frontier = eligible_frontier(curriculum.universe, curriculum.prerequisites, taken)

    if not frontier:
        print("No eligible courses.")
        return 0

    for cid in frontier:
        course = curriculum.get(cid)
        name = course.name if course else ""
        print(f"{cid} | {name}")
    print(f"Eligible: {len(frontier)}")
    return 0


def _cmd_check(args: argparse.Namespace, curriculum: Curriculum) -> int:
    """
    Report basic curriculum stats and prerequisites pointing at unknown courses.
    """
    print(f"Curriculum: {curriculum.name}")
    print(f"Courses loaded: {len(curriculum.courses)}")

    dangling = find_dangling_references(curriculum)
    if not dangling:
        print("All prerequisite references are valid.")
        return 0

    print(f"Unknown prerequisite references: {len(dangling)}")
    for cid, ref in dangling:
        print(f"- course {cid} requires unknown course {ref}")
    return 1


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="semplan", description="Semester course planner")
    parser.add_argument(
        "--curriculum",
        "-c",
        type=str,
        default=None,
        help="Curriculum JSON file or http(s) URL (default: bundled sample)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_plan = sub.add_parser("plan", help="Plan all courses into semesters")
    p_plan.add_argument(
        "--max", "-m", type=int, default=DEFAULT_MAX_PER_SEMESTER, help="Max courses per semester"
    )
    p_plan.add_argument("--out", "-o", type=str, default=None, help="Also export the plan as JSON")

    p_compare = sub.add_parser("compare", help="Compare semester counts for several capacities")
    p_compare.add_argument(
        "--max", "-m", type=int, nargs="+", default=DEFAULT_COMPARE_CAPACITIES, help="Capacities to compare"
    )

    p_eligible = sub.add_parser("eligible", help="List courses that can be taken next")
    p_eligible.add_argument("--taken", "-t", type=str, nargs="*", default=[], help="Course ids already taken")

    sub.add_parser("check", help="Validate the curriculum's prerequisite references")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, loads the curriculum, dispatches to
    command handlers, and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        curriculum = load_curriculum(args.curriculum)
    except CurriculumError as exc:
        print(f"Error: {exc}")
        raise SystemExit(1)
    except requests.RequestException as exc:
        print(f"Error: could not fetch curriculum: {exc}")
        raise SystemExit(1)

    try:
        if args.command == "plan":
            raise SystemExit(_cmd_plan(args, curriculum))
        if args.command == "compare":
            raise SystemExit(_cmd_compare(args, curriculum))
        if args.command == "eligible":
            raise SystemExit(_cmd_eligible(args, curriculum))
        if args.command == "check":
            raise SystemExit(_cmd_check(args, curriculum))
    except InvalidCapacity as exc:
        print(f"Error: {exc}")
        raise SystemExit(1)

    raise SystemExit(2)
