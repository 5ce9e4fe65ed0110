"""Functional core - pure business logic with no I/O."""

from .planner import (
    AvailableSlot,
    FixedCommitment,
    InvalidConfiguration,
    WorkingHours,
    extract_slots,
    plan,
    plan_best_fit,
    sort_candidates,
)
from .recommendations import CandidateTask, ScheduledTask, normalize_candidates
from .students import AttendanceEntry, ClassEntry, InvalidRollNumber, Student, check_roll_no
from .timetable import ScheduleItem, classes_for_day, merge_schedule, to_commitments, unique_courses
from .attendance import DuplicateSession, mark_attendance, set_interests

__all__ = [
    # Planner
    "AvailableSlot",
    "FixedCommitment",
    "InvalidConfiguration",
    "WorkingHours",
    "extract_slots",
    "plan",
    "plan_best_fit",
    "sort_candidates",
    # Recommendations
    "CandidateTask",
    "ScheduledTask",
    "normalize_candidates",
    # Students
    "AttendanceEntry",
    "ClassEntry",
    "InvalidRollNumber",
    "Student",
    "check_roll_no",
    # Timetable
    "ScheduleItem",
    "classes_for_day",
    "merge_schedule",
    "to_commitments",
    "unique_courses",
    # Attendance
    "DuplicateSession",
    "mark_attendance",
    "set_interests",
]
