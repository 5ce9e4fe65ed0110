"""File-based student repository adapter."""

import json
from pathlib import Path

from attendo.core.students import Student, check_roll_no


class FileStudentRepository:
    """
    File-based student storage.

    Implements StudentRepository protocol. One JSON file per roll number.
    """

    def __init__(self, students_dir: Path | str):
        self.students_dir = Path(students_dir).expanduser()
        self.students_dir.mkdir(parents=True, exist_ok=True)

    def _path_for(self, roll_no: str) -> Path:
        return self.students_dir / f"{check_roll_no(roll_no)}.json"

    def get(self, roll_no: str) -> Student | None:
        """Fetch a student by roll number. Returns None if not found."""
        path = self._path_for(roll_no)
        if not path.exists():
            return None
        return Student.from_dict(json.loads(path.read_text()))

    def save(self, student: Student) -> None:
        """Write/overwrite a student record."""
        self._path_for(student.roll_no).write_text(json.dumps(student.to_dict(), indent=2))

    def list_all(self) -> list[Student]:
        """All stored students, ordered by roll number."""
        return [
            Student.from_dict(json.loads(path.read_text()))
            for path in sorted(self.students_dir.glob("*.json"))
        ]
