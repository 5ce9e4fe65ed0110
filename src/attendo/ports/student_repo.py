"""Student repository interface."""

from typing import Protocol

from attendo.core.students import Student


class StudentRepository(Protocol):
    """Interface for loading and saving student records."""

    def get(self, roll_no: str) -> Student | None:
        """Fetch a student by roll number."""
        ...

    def save(self, student: Student) -> None:
        """Persist a student record."""
        ...

    def list_all(self) -> list[Student]:
        """All known students."""
        ...
