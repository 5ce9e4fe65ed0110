"""Student records - plain data, no I/O."""

from dataclasses import dataclass, field


class InvalidRollNumber(ValueError):
    """Raised for a roll number that cannot name a stored record."""

    pass


def check_roll_no(roll_no: str) -> str:
    """Return roll_no unchanged, or raise InvalidRollNumber if it is unsafe as a file name."""
    if not roll_no or roll_no in (".", "..") or "/" in roll_no or "\\" in roll_no:
        raise InvalidRollNumber(f"Invalid roll number: {roll_no!r}")
    return roll_no


@dataclass
class ClassEntry:
    """One weekly class on a student's timetable."""

    subject_code: str
    day: str
    start_time: str
    duration: str = "60 minutes"

    @classmethod
    def from_dict(cls, data: dict) -> "ClassEntry":
        return cls(
            subject_code=data["subject_code"],
            day=data["day"],
            start_time=data["start_time"],
            duration=str(data.get("duration") or "60 minutes"),
        )

    def to_dict(self) -> dict:
        return {
            "subject_code": self.subject_code,
            "day": self.day,
            "start_time": self.start_time,
            "duration": self.duration,
        }


@dataclass
class AttendanceEntry:
    """Per-subject attendance counters."""

    subject: str
    present_days: int = 0
    total_days: int = 0


@dataclass
class Student:
    """A student (or admin) account as the planner sees it."""

    roll_no: str
    name: str
    email: str = ""
    class_name: str = ""
    user_type: str = "student"
    subjects: list[ClassEntry] = field(default_factory=list)
    interests: list[str] = field(default_factory=list)
    interests_selected: bool = False
    attendance_log: list[AttendanceEntry] = field(default_factory=list)
    last_session_id: str | None = None

    @property
    def is_student(self) -> bool:
        return self.user_type == "student"

    @classmethod
    def from_dict(cls, data: dict) -> "Student":
        return cls(
            roll_no=data["roll_no"],
            name=data.get("name", ""),
            email=data.get("email", ""),
            class_name=data.get("class_name", ""),
            user_type=data.get("user_type", "student"),
            subjects=[ClassEntry.from_dict(s) for s in data.get("subjects", [])],
            interests=list(data.get("interests", [])),
            interests_selected=data.get("interests_selected", False),
            attendance_log=[
                AttendanceEntry(
                    subject=a["subject"],
                    present_days=a.get("present_days", 0),
                    total_days=a.get("total_days", 0),
                )
                for a in data.get("attendance_log", [])
            ],
            last_session_id=data.get("last_session_id"),
        )

    def to_dict(self) -> dict:
        return {
            "roll_no": self.roll_no,
            "name": self.name,
            "email": self.email,
            "class_name": self.class_name,
            "user_type": self.user_type,
            "subjects": [s.to_dict() for s in self.subjects],
            "interests": self.interests,
            "interests_selected": self.interests_selected,
            "attendance_log": [
                {
                    "subject": a.subject,
                    "present_days": a.present_days,
                    "total_days": a.total_days,
                }
                for a in self.attendance_log
            ],
            "last_session_id": self.last_session_id,
        }
