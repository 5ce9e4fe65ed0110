"""Daily plan storage interface."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol

from attendo.core.recommendations import ScheduledTask


@dataclass
class StoredPlan:
    """A planned day as persisted, keyed by (roll_no, date)."""

    roll_no: str
    date: date
    tasks: list[ScheduledTask]
    generated_at: datetime


class PlanStore(Protocol):
    """Interface for caching planned days per student."""

    def load(self, roll_no: str, target_date: date) -> StoredPlan | None:
        """Load the plan for a student and date. Returns None if not found."""
        ...

    def save(self, plan: StoredPlan) -> None:
        """Write/overwrite the plan for its student and date."""
        ...

    def purge_before(self, roll_no: str, cutoff: date) -> int:
        """Delete a student's plans dated before cutoff. Returns the count."""
        ...
