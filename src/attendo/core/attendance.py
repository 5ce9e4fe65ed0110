"""Pure attendance logic - mutates the student record, no I/O."""

from .students import AttendanceEntry, Student


class DuplicateSession(Exception):
    """Raised when attendance is marked twice for the same session."""

    pass


def mark_attendance(student: Student, session_id: str, subject: str) -> AttendanceEntry:
    """
    Count the student present for a subject in a session.

    Only the most recent session id is remembered, so re-scanning the same
    session is rejected while an older one is not.
    """
    if not session_id or not subject:
        raise ValueError("session_id and subject are required")
    if student.last_session_id == session_id:
        raise DuplicateSession(f"Attendance already marked for session {session_id}")

    entry = next((a for a in student.attendance_log if a.subject == subject), None)
    if entry:
        entry.present_days += 1
    else:
        entry = AttendanceEntry(subject=subject, present_days=1, total_days=0)
        student.attendance_log.append(entry)

    student.last_session_id = session_id
    return entry


def set_interests(student: Student, interests: list[str]) -> None:
    """Replace the student's interests and record that they have chosen."""
    student.interests = list(interests)
    if not student.interests_selected:
        student.interests_selected = True
