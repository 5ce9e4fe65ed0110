"""Recommendation service interface."""

from typing import Protocol


class RecommendationService(Protocol):
    """Interface for fetching recommended study tasks."""

    def fetch(self, request: dict) -> list[dict]:
        """Fetch raw recommendation items for a request payload."""
        ...
