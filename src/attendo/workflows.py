"""Shared workflow layer between the CLI and the background worker.

Every function takes its collaborators through a Services bundle so the
planner never reaches for global clients or connections.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .adapters.file_plan_store import FilePlanStore
from .adapters.file_student_repo import FileStudentRepository
from .adapters.recommendation_api import RecommendationAPIAdapter, RecommendationServiceError
from .config import Config
from .core.attendance import mark_attendance, set_interests
from .core.planner import plan
from .core.recommendations import ScheduledTask, normalize_candidates
from .core.students import AttendanceEntry, ClassEntry, Student
from .core.timetable import ScheduleItem, classes_for_day, merge_schedule, to_commitments, unique_courses
from .core.timeutil import day_name_from_iso
from .ports import PlanStore, RecommendationService, StoredPlan, StudentRepository

logger = logging.getLogger(__name__)


class StudentNotFound(LookupError):
    """Raised when no student exists for a roll number."""

    pass


@dataclass
class Services:
    """Collaborators the workflows need, passed in explicitly."""

    config: Config
    recommender: RecommendationService
    plans: PlanStore
    students: StudentRepository


def build_services(config: Config) -> Services:
    """Wire the default adapters from config."""
    data_dir = config.resolve_data_dir()
    return Services(
        config=config,
        recommender=RecommendationAPIAdapter(config),
        plans=FilePlanStore(data_dir / "plans"),
        students=FileStudentRepository(data_dir / "students"),
    )


@dataclass
class DaySchedule:
    """A student's classes and recommendations for one date."""

    student: Student
    date: date
    day: str
    items: list[ScheduleItem]
    class_count: int

    @property
    def recommendation_count(self) -> int:
        return len(self.items) - self.class_count

    def to_dict(self) -> dict:
        return {
            "student": {
                "name": self.student.name,
                "rollNo": self.student.roll_no,
                "class": self.student.class_name,
            },
            "date": self.date.isoformat(),
            "day": self.day,
            "classes": [i.to_dict() for i in self.items],
        }


@dataclass
class RecommendationResult:
    """Planned recommendations for a date and whether they came from cache."""

    tasks: list[ScheduledTask]
    cached: bool
    generated_at: datetime | None = None


def get_student(roll_no: str, services: Services) -> Student:
    """Load a student or raise StudentNotFound."""
    student = services.students.get(roll_no)
    if student is None:
        raise StudentNotFound(f"Student not found: {roll_no}")
    return student


def _coerce_date(target_date: date | str) -> date:
    if isinstance(target_date, date):
        return target_date
    if day_name_from_iso(target_date) is None:
        raise ValueError(f"Invalid date format: {target_date!r}. Use YYYY-MM-DD.")
    return date.fromisoformat(target_date)


def recommendation_request(
    student: Student,
    target_date: date,
    break_minutes: int,
) -> dict:
    """Payload for the recommendation service."""
    return {
        "user_id": student.roll_no,
        "break_duration_minutes": break_minutes,
        "current_courses": unique_courses(student),
        "interests": student.interests,
        "recent_attendance": {},
        "target_date": target_date.isoformat(),
    }


def generate_plan(
    student: Student,
    target_date: date,
    classes: list[ClassEntry],
    services: Services,
    break_minutes: int | None = None,
) -> StoredPlan | None:
    """
    Fetch recommendations, plan them around classes, and persist the result.

    Returns None when the service has nothing to recommend. Service errors
    propagate as RecommendationServiceError.
    """
    config = services.config
    if break_minutes is None:
        break_minutes = config.break_duration_minutes

    request = recommendation_request(student, target_date, break_minutes)
    raw = services.recommender.fetch(request)
    if not raw:
        logger.info(f"No recommendations for {student.roll_no} on {target_date}")
        return None

    candidates = normalize_candidates(raw)
    scheduled = plan(to_commitments(classes), candidates, config.working_hours_window())
    logger.info(
        f"Assigned time slots to {len(scheduled)} of {len(candidates)} "
        f"recommendations for {student.roll_no} on {target_date}"
    )

    stored = StoredPlan(
        roll_no=student.roll_no,
        date=target_date,
        tasks=scheduled,
        generated_at=datetime.now(),
    )
    services.plans.save(stored)
    return stored


def build_schedule(
    student: Student,
    target_date: date | str,
    services: Services,
    today: date | None = None,
) -> DaySchedule:
    """
    Assemble a day's classes plus recommended study tasks.

    A stored plan for the date is reused. Otherwise a new one is generated
    when the date falls between today and the lookahead horizon. An
    unreachable recommendation service leaves the schedule with classes only.
    """
    target = _coerce_date(target_date)
    today = today or date.today()
    day = target.strftime("%A")

    classes = classes_for_day(student, day)
    scheduled: list[ScheduledTask] = []

    stored = services.plans.load(student.roll_no, target)
    horizon = today + timedelta(days=services.config.lookahead_days)

    if stored is None and today <= target <= horizon:
        logger.info(f"Generating recommendations for {student.roll_no} on {target}")
        try:
            stored = generate_plan(student, target, classes, services)
        except RecommendationServiceError as e:
            logger.error(f"Error calling recommendation service: {e}")
        if stored:
            scheduled = stored.tasks
    elif stored is not None:
        logger.info(f"Found existing recommendations for {student.roll_no} on {target}")
        scheduled = stored.tasks
    else:
        logger.debug(f"No recommendations found or generated for {target}")

    items = merge_schedule(classes, scheduled, student.class_name)
    return DaySchedule(
        student=student,
        date=target,
        day=day,
        items=items,
        class_count=len(classes),
    )


def get_recommendations(
    student: Student,
    target_date: date | str | None,
    services: Services,
    today: date | None = None,
    break_minutes: int | None = None,
) -> RecommendationResult:
    """
    Planned recommendations for a date.

    Cached plans are returned for any date; new ones are only generated
    for today.
    """
    today = today or date.today()
    target = _coerce_date(target_date) if target_date else today

    stored = services.plans.load(student.roll_no, target)
    if stored is not None:
        return RecommendationResult(tasks=stored.tasks, cached=True, generated_at=stored.generated_at)

    if target == today:
        classes = classes_for_day(student, target.strftime("%A"))
        try:
            stored = generate_plan(student, target, classes, services, break_minutes)
        except RecommendationServiceError as e:
            logger.error(f"Error calling recommendation service: {e}")
        if stored is not None:
            return RecommendationResult(tasks=stored.tasks, cached=False, generated_at=stored.generated_at)

    return RecommendationResult(tasks=[], cached=False)


def cleanup_plans(roll_no: str, services: Services, today: date | None = None) -> int:
    """Remove a student's plans older than the retention period."""
    today = today or date.today()
    cutoff = today - timedelta(days=services.config.plan_retention_days)
    try:
        removed = services.plans.purge_before(roll_no, cutoff)
    except OSError as e:
        logger.error(f"Error cleaning up plans for {roll_no}: {e}")
        return 0
    logger.info(f"Cleaned up {removed} old plans for {roll_no}")
    return removed


def precompute_plans(services: Services, today: date | None = None) -> int:
    """Build tomorrow's schedule for every student and purge stale plans.

    Returns the number of students whose schedule was built. A failure for
    one student is logged and does not stop the others.
    """
    today = today or date.today()
    tomorrow = today + timedelta(days=1)
    built = 0
    for student in services.students.list_all():
        if not student.is_student:
            continue
        try:
            build_schedule(student, tomorrow, services, today=today)
            cleanup_plans(student.roll_no, services, today=today)
        except Exception as e:
            logger.error(f"Failed to precompute plan for {student.roll_no}: {e}")
            continue
        built += 1
    logger.info(f"Precomputed plans for {built} students for {tomorrow}")
    return built


def record_attendance(
    roll_no: str,
    session_id: str,
    subject: str,
    services: Services,
) -> AttendanceEntry:
    """Mark a student present and persist the record."""
    student = get_student(roll_no, services)
    entry = mark_attendance(student, session_id, subject)
    services.students.save(student)
    return entry


def update_interests(roll_no: str, interests: list[str], services: Services) -> Student:
    """Replace a student's interests and persist the record."""
    student = get_student(roll_no, services)
    set_interests(student, interests)
    services.students.save(student)
    return student
