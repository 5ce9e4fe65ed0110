"""Recommendation API adapter - HTTP client for study task suggestions."""

import logging

import requests

from attendo.config import Config, load_config

logger = logging.getLogger(__name__)


class RecommendationServiceError(Exception):
    """Raised when the recommendation service cannot be reached or fails."""

    pass


class RecommendationAPIAdapter:
    """
    Recommendation service adapter.

    Implements RecommendationService protocol. POSTs the request payload as
    JSON and returns the raw list of items. No business logic - just I/O.
    """

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or load_config()
        self._session = session or requests.Session()

    def fetch(self, request: dict) -> list[dict]:
        """Fetch raw recommendation items for a request payload."""
        url = self.config.recommendation_api_url
        try:
            resp = self._session.post(
                url,
                json=request,
                headers={"Content-Type": "application/json"},
                timeout=self.config.recommendation_timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise RecommendationServiceError(f"Recommendation request to {url} failed: {e}") from e
        except ValueError as e:
            raise RecommendationServiceError(f"Recommendation service returned invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise RecommendationServiceError(
                f"Expected a list of recommendations, got {type(data).__name__}"
            )

        logger.info(f"Received {len(data)} recommendations for {request.get('user_id')}")
        return data
