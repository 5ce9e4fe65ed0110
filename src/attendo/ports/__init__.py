"""Ports - interfaces/protocols for external dependencies."""

from .recommendation_service import RecommendationService
from .plan_store import PlanStore, StoredPlan
from .student_repo import StudentRepository

__all__ = [
    "RecommendationService",
    "PlanStore",
    "StoredPlan",
    "StudentRepository",
]
