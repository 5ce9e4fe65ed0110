"""Adapters - I/O implementations of ports."""

from .recommendation_api import RecommendationAPIAdapter, RecommendationServiceError
from .file_plan_store import FilePlanStore
from .file_student_repo import FileStudentRepository

__all__ = [
    "RecommendationAPIAdapter",
    "RecommendationServiceError",
    "FilePlanStore",
    "FileStudentRepository",
]
