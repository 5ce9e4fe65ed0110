"""Pure timetable logic - no I/O dependencies."""

from dataclasses import dataclass

from .planner import FixedCommitment
from .recommendations import ScheduledTask
from .students import ClassEntry, Student
from .timeutil import parse_duration, time_to_minutes


@dataclass
class ScheduleItem:
    """One row of a day's schedule: an official class or a recommendation."""

    subject: str
    start_time: str
    duration: str
    type: str
    is_official: bool
    class_name: str = ""
    reasoning: str = ""
    urgency_level: str = ""
    task_type: str = ""
    task_id: str = ""

    def format(self) -> str:
        marker = "" if self.is_official else " (recommended)"
        return f"{self.start_time}  {self.subject} [{self.duration}]{marker}"

    def to_dict(self) -> dict:
        data = {
            "subject": self.subject,
            "class": self.class_name,
            "startTime": self.start_time,
            "duration": self.duration,
            "type": self.type,
            "isOfficial": self.is_official,
        }
        if not self.is_official:
            data.update(
                {
                    "reasoning": self.reasoning,
                    "urgencyLevel": self.urgency_level,
                    "taskType": self.task_type,
                    "taskId": self.task_id,
                }
            )
        return data


def classes_for_day(student: Student, day_name: str) -> list[ClassEntry]:
    """
    Classes on a given weekday, sorted by start time.

    Day names match case-insensitively. Pure function - no I/O.
    """
    day = day_name.lower()
    return sorted(
        [c for c in student.subjects if str(c.day).lower() == day],
        key=lambda c: time_to_minutes(c.start_time),
    )


def to_commitments(classes: list[ClassEntry]) -> list[FixedCommitment]:
    """Convert timetable entries to planner commitments."""
    return [
        FixedCommitment(
            start_minutes=time_to_minutes(c.start_time),
            duration_minutes=parse_duration(c.duration),
        )
        for c in classes
    ]


def unique_courses(student: Student) -> list[str]:
    """Subject codes in first-seen order."""
    seen: dict[str, None] = {}
    for c in student.subjects:
        seen.setdefault(c.subject_code, None)
    return list(seen)


def merge_schedule(
    classes: list[ClassEntry],
    scheduled: list[ScheduledTask],
    class_name: str = "",
) -> list[ScheduleItem]:
    """
    Combine classes and placed recommendations into one day view.

    Sorted by start time; classes win ties. Pure function - no I/O.
    """
    items = [
        ScheduleItem(
            subject=c.subject_code,
            start_time=c.start_time,
            duration=c.duration,
            type="class",
            is_official=True,
            class_name=class_name,
        )
        for c in classes
    ]
    items.extend(
        ScheduleItem(
            subject=s.task.title,
            start_time=s.suggested_start_time,
            duration=f"{s.task.estimated_minutes} minutes",
            type="recommendation",
            is_official=False,
            class_name="Recommended",
            reasoning=s.task.reasoning,
            urgency_level=s.task.urgency,
            task_type=s.task.task_type,
            task_id=s.task.id,
        )
        for s in scheduled
    )
    return sorted(items, key=lambda i: time_to_minutes(i.start_time))
