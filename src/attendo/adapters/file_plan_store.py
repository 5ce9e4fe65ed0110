"""File-based daily plan storage adapter."""

import json
import logging
from datetime import date, datetime
from pathlib import Path

from attendo.core.recommendations import ScheduledTask
from attendo.core.students import check_roll_no
from attendo.ports.plan_store import StoredPlan

logger = logging.getLogger(__name__)


class FilePlanStore:
    """
    File-based plan storage.

    Implements PlanStore protocol. Each student gets a directory and each
    planned day a JSON file named after its date.
    """

    def __init__(self, plans_dir: Path | str):
        self.plans_dir = Path(plans_dir).expanduser()
        self.plans_dir.mkdir(parents=True, exist_ok=True)

    def _student_dir(self, roll_no: str) -> Path:
        return self.plans_dir / check_roll_no(roll_no)

    def _path_for(self, roll_no: str, target_date: date) -> Path:
        """Get the file path for a student's plan on a given date."""
        return self._student_dir(roll_no) / f"{target_date.isoformat()}.json"

    def load(self, roll_no: str, target_date: date) -> StoredPlan | None:
        """Load the plan for a student and date. Returns None if not found or unreadable."""
        path = self._path_for(roll_no, target_date)
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text())
            return StoredPlan(
                roll_no=data["roll_no"],
                date=date.fromisoformat(data["date"]),
                tasks=[ScheduledTask.from_dict(t) for t in data.get("tasks", [])],
                generated_at=datetime.fromisoformat(data["generated_at"]),
            )
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring unreadable plan {path}: {e}")
            return None

    def save(self, plan: StoredPlan) -> None:
        """Write/overwrite the plan for its student and date."""
        path = self._path_for(plan.roll_no, plan.date)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(
                {
                    "roll_no": plan.roll_no,
                    "date": plan.date.isoformat(),
                    "tasks": [t.to_dict() for t in plan.tasks],
                    "generated_at": plan.generated_at.isoformat(),
                },
                indent=2,
            )
        )

    def list_dates(self, roll_no: str) -> list[date]:
        """List dates with stored plans for a student."""
        student_dir = self._student_dir(roll_no)
        if not student_dir.exists():
            return []
        dates = []
        for path in student_dir.glob("*.json"):
            try:
                dates.append(date.fromisoformat(path.stem))
            except ValueError:
                continue
        return sorted(dates)

    def purge_before(self, roll_no: str, cutoff: date) -> int:
        """Delete a student's plans dated before cutoff. Returns the count."""
        removed = 0
        for plan_date in self.list_dates(roll_no):
            if plan_date < cutoff:
                self._path_for(roll_no, plan_date).unlink()
                removed += 1
        if removed:
            logger.info(f"Removed {removed} plans before {cutoff} for {roll_no}")
        return removed
