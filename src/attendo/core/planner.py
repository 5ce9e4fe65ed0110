"""Pure daily slot planning - no I/O dependencies."""

from dataclasses import dataclass

from .recommendations import CandidateTask, ScheduledTask, urgency_weight
from .timeutil import minutes_to_time

MIN_SLOT_MINUTES = 10
BUFFER_MINUTES = 5
MINUTES_PER_DAY = 24 * 60


class InvalidConfiguration(Exception):
    """Raised when the working-hours window is malformed."""

    pass


@dataclass(frozen=True)
class WorkingHours:
    """The window of the day that tasks may be placed in."""

    start_minutes: int = 9 * 60
    end_minutes: int = 18 * 60

    def __post_init__(self):
        if not (0 <= self.start_minutes < MINUTES_PER_DAY):
            raise InvalidConfiguration(f"Working hours start out of range: {self.start_minutes}")
        if not (0 <= self.end_minutes < MINUTES_PER_DAY):
            raise InvalidConfiguration(f"Working hours end out of range: {self.end_minutes}")
        if self.start_minutes >= self.end_minutes:
            raise InvalidConfiguration(
                f"Working hours start ({minutes_to_time(self.start_minutes)}) must be before "
                f"end ({minutes_to_time(self.end_minutes)})"
            )

    def format(self) -> str:
        return f"{minutes_to_time(self.start_minutes)}-{minutes_to_time(self.end_minutes)}"


@dataclass(frozen=True)
class FixedCommitment:
    """A class already on the timetable."""

    start_minutes: int
    duration_minutes: int

    @property
    def end_minutes(self) -> int:
        return self.start_minutes + self.duration_minutes


@dataclass
class AvailableSlot:
    """A free interval, consumed in place while tasks are placed."""

    start_minutes: int
    end_minutes: int
    duration_minutes: int

    @classmethod
    def between(cls, start: int, end: int) -> "AvailableSlot":
        return cls(start_minutes=start, end_minutes=end, duration_minutes=end - start)

    def format(self) -> str:
        return (
            f"{minutes_to_time(self.start_minutes)}-{minutes_to_time(self.end_minutes)} "
            f"({self.duration_minutes} min)"
        )


def extract_slots(
    commitments: list[FixedCommitment],
    working_hours: WorkingHours,
) -> list[AvailableSlot]:
    """
    Find free gaps of at least MIN_SLOT_MINUTES between commitments.

    Pure function - no I/O.
    """
    busy = sorted(commitments, key=lambda c: c.start_minutes)

    slots = []
    current = working_hours.start_minutes

    for commitment in busy:
        # Gap before this class?
        if current < commitment.start_minutes:
            gap_end = min(commitment.start_minutes, working_hours.end_minutes)
            if gap_end - current >= MIN_SLOT_MINUTES:
                slots.append(AvailableSlot.between(current, gap_end))
        current = max(current, commitment.end_minutes)

    # Gap after the last class?
    if current < working_hours.end_minutes:
        if working_hours.end_minutes - current >= MIN_SLOT_MINUTES:
            slots.append(AvailableSlot.between(current, working_hours.end_minutes))

    return slots


def sort_candidates(candidates: list[CandidateTask]) -> list[CandidateTask]:
    """
    Sort by urgency (descending) then rank (ascending).

    Stable: equal candidates keep their input order.
    """
    return sorted(candidates, key=lambda c: (-urgency_weight(c.urgency), c.rank))


def _place(candidate: CandidateTask, slot: AvailableSlot) -> ScheduledTask:
    start = slot.start_minutes
    end = start + candidate.estimated_minutes
    slot.start_minutes += candidate.estimated_minutes + BUFFER_MINUTES
    slot.duration_minutes -= candidate.estimated_minutes + BUFFER_MINUTES
    return ScheduledTask.from_candidate(candidate, start, end)


def plan(
    commitments: list[FixedCommitment],
    candidates: list[CandidateTask],
    working_hours: WorkingHours | None = None,
) -> list[ScheduledTask]:
    """
    Greedily pack candidates into the day's free slots in priority order.

    The slot cursor only moves forward: a slot too small for one candidate
    is never offered to a later one, and once the cursor runs off the end
    the remaining candidates are dropped. Unplaced tasks are omitted, not
    reported.

    Pure function - no I/O.
    """
    working_hours = working_hours or WorkingHours()
    slots = extract_slots(commitments, working_hours)

    scheduled = []
    cursor = 0

    for candidate in sort_candidates(candidates):
        while cursor < len(slots):
            slot = slots[cursor]
            if slot.duration_minutes >= candidate.estimated_minutes:
                scheduled.append(_place(candidate, slot))
                if slot.duration_minutes < MIN_SLOT_MINUTES:
                    cursor += 1
                break
            cursor += 1

        if cursor >= len(slots):
            break

    return scheduled


def plan_best_fit(
    commitments: list[FixedCommitment],
    candidates: list[CandidateTask],
    working_hours: WorkingHours | None = None,
) -> list[ScheduledTask]:
    """
    Like plan(), but every candidate is offered every remaining slot.

    A candidate goes into the earliest slot that still fits it, so a large
    task no longer starves smaller ones behind it. Output is in placement
    order, which is still priority order.
    """
    working_hours = working_hours or WorkingHours()
    slots = extract_slots(commitments, working_hours)

    scheduled = []
    for candidate in sort_candidates(candidates):
        slot = next(
            (
                s
                for s in slots
                if s.duration_minutes >= MIN_SLOT_MINUTES
                and s.duration_minutes >= candidate.estimated_minutes
            ),
            None,
        )
        if slot is not None:
            scheduled.append(_place(candidate, slot))

    return scheduled
