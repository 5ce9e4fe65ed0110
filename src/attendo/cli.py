"""Attendo CLI - student timetable and study planner."""

import json
import logging
import sys
from datetime import date
from pathlib import Path

import click

from .config import load_config
from .core.attendance import DuplicateSession
from .core.planner import InvalidConfiguration, plan, plan_best_fit
from .core.recommendations import ScheduledTask, normalize_candidates
from .core.students import ClassEntry, InvalidRollNumber
from .core.timetable import to_commitments, unique_courses
from .core.timeutil import day_name_from_iso
from .workflows import (
    StudentNotFound,
    build_schedule,
    build_services,
    cleanup_plans,
    get_recommendations,
    get_student,
    record_attendance,
    update_interests,
)

STRATEGIES = {"greedy": plan, "best-fit": plan_best_fit}


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _parse_date(value: str | None) -> date:
    if not value:
        return date.today()
    if day_name_from_iso(value) is None:
        raise click.BadParameter(f"{value!r} is not a YYYY-MM-DD date", param_hint="--date")
    return date.fromisoformat(value)


def _read_json_list(path: Path) -> list:
    data = json.loads(path.read_text())
    if not isinstance(data, list):
        raise click.BadParameter(f"{path} must contain a JSON list")
    return data


def _show_tasks(tasks: list[ScheduledTask], as_json: bool, empty_msg: str) -> None:
    """Shared task display logic."""
    if as_json:
        click.echo(json.dumps([t.to_dict() for t in tasks], indent=2))
        return
    if not tasks:
        click.echo(empty_msg)
        return
    for task in tasks:
        click.echo(f"  {task.format()}")


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="attendo")
def main(debug: bool):
    """Attendo - student timetable and study planner."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )


@main.command("plan")
@click.argument("timetable", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("candidates", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--date", "-d", "target_date", default=None, help="Date to plan (YYYY-MM-DD), defaults to today")
@click.option("--working-hours", default=None, help="Window as HH:MM-HH:MM (defaults to config)")
@click.option(
    "--strategy",
    type=click.Choice(sorted(STRATEGIES)),
    default="greedy",
    show_default=True,
    help="Placement strategy",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def plan_cmd(
    timetable: Path,
    candidates: Path,
    target_date: str | None,
    working_hours: str | None,
    strategy: str,
    as_json: bool,
):
    """Plan recommendation CANDIDATES around the classes in TIMETABLE.

    Both files hold JSON lists: timetable entries with subject_code, day,
    start_time and duration; candidates as returned by the recommendation
    service.
    """
    config = load_config()
    if working_hours:
        config.working_hours = working_hours
    target = _parse_date(target_date)
    day = target.strftime("%A").lower()

    try:
        window = config.working_hours_window()
    except InvalidConfiguration as e:
        _fail(str(e))

    classes = [ClassEntry.from_dict(c) for c in _read_json_list(timetable)]
    todays = [c for c in classes if c.day.lower() == day]
    tasks = STRATEGIES[strategy](
        to_commitments(todays),
        normalize_candidates(_read_json_list(candidates)),
        window,
    )

    if not as_json:
        click.echo(f"### {target.strftime('%A, %B %d')} ({window.format()})")
    _show_tasks(tasks, as_json, "No tasks fit today.")


@main.command()
@click.argument("roll_no")
@click.option("--date", "-d", "target_date", default=None, help="Date (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def schedule(roll_no: str, target_date: str | None, as_json: bool):
    """Show a student's classes and recommended study tasks for a day."""
    services = build_services(load_config())
    target = _parse_date(target_date)
    try:
        student = get_student(roll_no, services)
        day_schedule = build_schedule(student, target, services)
    except (StudentNotFound, InvalidRollNumber, InvalidConfiguration) as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps(day_schedule.to_dict(), indent=2))
        return

    click.echo(f"### {day_schedule.day}, {target.strftime('%B %d')} - {student.name}")
    if not day_schedule.items:
        click.echo("Nothing scheduled.")
        return
    for item in day_schedule.items:
        click.echo(f"  {item.format()}")


@main.command()
@click.argument("roll_no")
@click.option("--date", "-d", "target_date", default=None, help="Date (YYYY-MM-DD), defaults to today")
@click.option("--duration", type=int, default=None, help="Break duration in minutes")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def recommendations(roll_no: str, target_date: str | None, duration: int | None, as_json: bool):
    """Show planned study recommendations for a day."""
    services = build_services(load_config())
    target = _parse_date(target_date)
    try:
        student = get_student(roll_no, services)
        result = get_recommendations(student, target, services, break_minutes=duration)
    except (StudentNotFound, InvalidRollNumber, InvalidConfiguration) as e:
        _fail(str(e))

    if as_json:
        click.echo(
            json.dumps(
                {
                    "tasks": [t.to_dict() for t in result.tasks],
                    "cached": result.cached,
                    "generatedAt": result.generated_at.isoformat() if result.generated_at else None,
                },
                indent=2,
            )
        )
        return

    _show_tasks(result.tasks, False, "No recommendations.")


@main.command()
@click.argument("roll_no")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def courses(roll_no: str, as_json: bool):
    """List a student's courses."""
    services = build_services(load_config())
    try:
        student = get_student(roll_no, services)
    except (StudentNotFound, InvalidRollNumber) as e:
        _fail(str(e))

    codes = unique_courses(student)
    if as_json:
        click.echo(json.dumps(codes))
        return
    for code in codes:
        click.echo(f"• {code}")


@main.command()
@click.argument("roll_no")
@click.argument("session_id")
@click.argument("subject")
def attend(roll_no: str, session_id: str, subject: str):
    """Mark a student present for SUBJECT in SESSION_ID."""
    services = build_services(load_config())
    try:
        entry = record_attendance(roll_no, session_id, subject, services)
    except (StudentNotFound, DuplicateSession, ValueError) as e:
        _fail(str(e))
    click.echo(f"Attendance marked for {entry.subject} ({entry.present_days} present)")


@main.command()
@click.argument("roll_no")
@click.argument("interest", nargs=-1, required=True)
def interests(roll_no: str, interest: tuple[str, ...]):
    """Set a student's interests."""
    services = build_services(load_config())
    try:
        student = update_interests(roll_no, list(interest), services)
    except (StudentNotFound, InvalidRollNumber) as e:
        _fail(str(e))
    click.echo(f"Interests updated: {', '.join(student.interests)}")


@main.command()
@click.argument("roll_no")
def cleanup(roll_no: str):
    """Delete a student's stored plans past the retention period."""
    config = load_config()
    try:
        removed = cleanup_plans(roll_no, build_services(config))
    except InvalidRollNumber as e:
        _fail(str(e))
    click.echo(f"Removed {removed} plans older than {config.plan_retention_days} days.")


@main.command()
def worker():
    """Run the nightly plan precomputation worker."""
    from .worker import run_worker

    click.echo("Starting Attendo worker...")
    click.echo("Press Ctrl+C to stop")
    try:
        run_worker()
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nWorker stopped.")
