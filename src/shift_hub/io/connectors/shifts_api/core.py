"""
Shifts API HTTP client core implementation.
"""

import logging
from typing import Any, Dict, List

import requests

from .models import ShiftsApiDecodeError
from .parsers import unwrap_collection
from .transport import ShiftsApiTransport

logger = logging.getLogger(__name__)


class ShiftsApiClient(ShiftsApiTransport):
    """
    Synchronous HTTP client for the workplaces/shifts API.

    Inherits transport logic (timeouts, retries, status mapping) from
    ShiftsApiTransport. A single instance may be shared between threads
    issuing independent GET requests.
    """

    def url_for(self, endpoint: str) -> str:
        """Resolve an endpoint path (or absolute URL) against the base URL."""
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def fetch_collection(self, endpoint: str) -> List[Dict[str, Any]]:
        """
        Fetch a collection endpoint and return its unwrapped records.

        Args:
            endpoint: Path of the collection, e.g. ``/workplaces``

        Returns:
            List of raw record dicts found under the response's ``data`` field

        Raises:
            ShiftsApiClientError: On connection failure or non-success status
            ShiftsApiDecodeError: On an unparseable body or missing envelope
        """
        if not endpoint or not endpoint.strip():
            raise ValueError("Endpoint cannot be empty")

        url = self.url_for(endpoint.strip())
        logger.info(
            "Fetching collection from shifts API",
            extra={"endpoint": endpoint},
        )

        response = self._make_request("GET", url)
        try:
            payload = response.json()
        except requests.JSONDecodeError as e:
            logger.error(
                "Failed to parse shifts API response",
                extra={"endpoint": endpoint, "error": str(e)},
            )
            raise ShiftsApiDecodeError(
                f"Invalid JSON response from {endpoint}: {e}"
            ) from e

        records = unwrap_collection(payload)

        logger.info(
            "Collection fetched",
            extra={"endpoint": endpoint, "records_count": len(records)},
        )
        return records
