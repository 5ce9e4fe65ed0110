"""Pure recommendation task logic - no I/O dependencies."""

from dataclasses import dataclass, field

from .timeutil import minutes_to_time, parse_duration, time_to_minutes

DEFAULT_TASK_MINUTES = 15

URGENCY_WEIGHTS = {"high": 3, "medium": 2, "low": 1}


def normalize_urgency(value: str | None) -> str:
    """Lower-case a known urgency label; anything else is "medium"."""
    label = (value or "").strip().lower()
    return label if label in URGENCY_WEIGHTS else "medium"


def urgency_weight(urgency: str | None) -> int:
    return URGENCY_WEIGHTS[normalize_urgency(urgency)]


@dataclass
class CandidateTask:
    """A recommended study task that has not been placed yet."""

    id: str
    title: str
    description: str = ""
    estimated_minutes: int = DEFAULT_TASK_MINUTES
    urgency: str = "medium"
    rank: int = 1
    task_type: str = ""
    course_tags: list[str] = field(default_factory=list)
    topic_tags: list[str] = field(default_factory=list)
    reasoning: str = ""
    difficulty: str = "medium"

    @classmethod
    def from_api(cls, data: dict) -> "CandidateTask":
        """Create CandidateTask from a recommendation service response item."""
        estimated = parse_duration(data.get("estimated_time"), default=DEFAULT_TASK_MINUTES)
        if estimated <= 0:
            estimated = DEFAULT_TASK_MINUTES
        return cls(
            id=str(data.get("task_id", "")),
            title=data.get("title") or "",
            description=data.get("description") or "",
            estimated_minutes=estimated,
            urgency=normalize_urgency(data.get("urgency_level")),
            rank=_positive_int(data.get("rank")) or 1,
            task_type=data.get("task_type") or "",
            course_tags=list(data.get("course_tags") or []),
            topic_tags=list(data.get("topic_tags") or []),
            reasoning=data.get("reasoning") or "",
            difficulty=data.get("difficulty_level") or "medium",
        )


def _positive_int(value) -> int | None:
    """Coerce numeric-ish upstream values; None unless the result is > 0."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


@dataclass
class ScheduledTask:
    """A candidate task with a concrete placement in the day."""

    task: CandidateTask
    suggested_start_minutes: int
    suggested_end_minutes: int
    is_scheduled: bool = False

    @classmethod
    def from_candidate(cls, task: CandidateTask, start: int, end: int) -> "ScheduledTask":
        return cls(task=task, suggested_start_minutes=start, suggested_end_minutes=end)

    @property
    def suggested_start_time(self) -> str:
        return minutes_to_time(self.suggested_start_minutes)

    @property
    def suggested_end_time(self) -> str:
        return minutes_to_time(self.suggested_end_minutes)

    def format(self) -> str:
        return (
            f"{self.suggested_start_time}-{self.suggested_end_time} "
            f"[{self.task.urgency}] {self.task.title}"
        )

    def to_dict(self) -> dict:
        """Serialize to the stored plan shape."""
        t = self.task
        return {
            "taskId": t.id,
            "title": t.title,
            "description": t.description,
            "estimatedTime": t.estimated_minutes,
            "taskType": t.task_type,
            "courseTags": t.course_tags,
            "topicTags": t.topic_tags,
            "reasoning": t.reasoning,
            "urgencyLevel": t.urgency,
            "suggestedStartTime": self.suggested_start_time,
            "suggestedEndTime": self.suggested_end_time,
            "isScheduled": self.is_scheduled,
            "rank": t.rank,
            "difficultyLevel": t.difficulty,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ScheduledTask":
        """Rebuild from the stored plan shape."""
        task = CandidateTask(
            id=data.get("taskId", ""),
            title=data.get("title", ""),
            description=data.get("description", ""),
            estimated_minutes=data.get("estimatedTime", DEFAULT_TASK_MINUTES),
            urgency=normalize_urgency(data.get("urgencyLevel")),
            rank=data.get("rank", 1),
            task_type=data.get("taskType", ""),
            course_tags=data.get("courseTags", []),
            topic_tags=data.get("topicTags", []),
            reasoning=data.get("reasoning", ""),
            difficulty=data.get("difficultyLevel", "medium"),
        )
        return cls(
            task=task,
            suggested_start_minutes=time_to_minutes(data.get("suggestedStartTime")),
            suggested_end_minutes=time_to_minutes(data.get("suggestedEndTime")),
            is_scheduled=data.get("isScheduled", False),
        )


def normalize_candidates(raw: list[dict]) -> list[CandidateTask]:
    """Map raw upstream items to CandidateTasks, skipping non-dict entries."""
    return [CandidateTask.from_api(item) for item in raw if isinstance(item, dict)]
