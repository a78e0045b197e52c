"""
Plan rendering (console output).

Everything here only reads Plan / UnsatisfiableGraph values produced by
semplan.scheduler; nothing is computed back into the planning core.
"""

from __future__ import annotations

from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from semplan.eligibility import unsatisfied_groups
from semplan.model import Curriculum, Plan, PlanResult, UnsatisfiableGraph


def _course_name(curriculum: Curriculum, course_id: Any) -> str:
    course = curriculum.get(course_id)
    return course.name if course else f"(unknown course {course_id})"


def _course_credits(curriculum: Curriculum, course_id: Any) -> int:
    course = curriculum.get(course_id)
    return course.credits if course else 0


def plan_summary(plan: Plan, curriculum: Curriculum) -> dict[str, int]:
    """
    Totals shown under a rendered plan.
    """
    credits = sum(_course_credits(curriculum, cid) for semester in plan.semesters for cid in semester)
    return {"semesters": plan.semester_count, "courses": plan.course_count, "credits": credits}


def _semester_table(number: int, semester: list[Any], curriculum: Curriculum) -> Table:
    table = Table(title=f"Semester {number}", box=box.SIMPLE, title_justify="left")
    table.add_column("ID", justify="right")
    table.add_column("Course")
    table.add_column("Credits", justify="right")
    for cid in semester:
        table.add_row(str(cid), _course_name(curriculum, cid), str(_course_credits(curriculum, cid)))
    table.caption = f"Courses: {len(semester)}"
    return table


def render_plan(plan: Plan, curriculum: Curriculum, console: Optional[Console] = None) -> None:
    """
    Print every semester as a table, followed by the summary.
    """
    console = console or Console()

    console.print(f"[bold]Study plan - {curriculum.name}[/]")
    for i, semester in enumerate(plan.semesters, start=1):
        console.print(_semester_table(i, semester, curriculum))

    summary = plan_summary(plan, curriculum)
    console.print("[bold]Summary[/]")
    console.print(f"  Total semesters: {summary['semesters']}")
    console.print(f"  Total courses: {summary['courses']}")
    console.print(f"  Estimated credits: {summary['credits']}")


def render_stall(result: UnsatisfiableGraph, curriculum: Curriculum, console: Optional[Console] = None) -> None:
    """
    Print the partial plan and why the remaining courses could not be scheduled.
    """
    console = console or Console()

    if result.partial.semesters:
        render_plan(result.partial, curriculum, console)

    console.print("[bold red]ERROR: no more courses can be scheduled.[/]")
    console.print("  Possible prerequisite cycle or misconfigured curriculum.")
    console.print(f"  Courses scheduled: {result.scheduled_count}/{result.total_count}")

    scheduled = {cid for semester in result.partial.semesters for cid in semester}
    prerequisites = curriculum.prerequisites

    table = Table(title="Blocked courses", box=box.SIMPLE, title_justify="left")
    table.add_column("ID", justify="right")
    table.add_column("Course")
    table.add_column("Missing (one of each group)")
    for cid in result.remaining:
        groups = unsatisfied_groups(cid, prerequisites, scheduled)
        missing = "; ".join(
            " or ".join(str(p) for p in group) if group else "(empty group)" for group in groups
        )
        table.add_row(str(cid), _course_name(curriculum, cid), missing)
    console.print(table)


def render_comparison(rows: list[tuple[int, PlanResult]], console: Optional[Console] = None) -> None:
    """
    Print one line per capacity: how many semesters the plan needs.
    """
    console = console or Console()

    table = Table(title="Scenario comparison", box=box.SIMPLE, title_justify="left")
    table.add_column("Max courses/semester", justify="right")
    table.add_column("Semesters", justify="right")
    for cap, result in rows:
        if isinstance(result, UnsatisfiableGraph):
            outcome = f"stalled ({result.scheduled_count}/{result.total_count})"
        else:
            outcome = str(result.semester_count)
        table.add_row(str(cap), outcome)
    console.print(table)
