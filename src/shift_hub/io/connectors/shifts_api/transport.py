"""
HTTP Transport layer for the shifts API connector.
Handles session setup, configuration, status mapping and retries.
"""

import logging
import random
import time
from typing import Optional

import requests

from shift_hub.config.settings import get_settings
from .models import (
    ShiftsApiClientError,
    ShiftsApiNotFoundError,
)
from .utils import sanitize_url_for_logging

logger = logging.getLogger(__name__)


class ShiftsApiTransport:
    """
    Base HTTP transport for the shifts API.
    Handles session management, headers, timeouts and retries.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        retry_max: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the transport with configuration.

        Args:
            base_url: API base URL. If None, uses settings default
            timeout: Request timeout in seconds. If None, uses settings default
            retry_max: Retry attempts for 5xx and connection errors. If None,
                uses settings default
            session: Pre-configured requests session (a new one is created
                when omitted)
        """
        self.settings = get_settings()

        self.base_url = (
            base_url if base_url is not None else self.settings.api_base_url
        ).rstrip("/")
        self.timeout = timeout if timeout is not None else self.settings.api_timeout
        self.retry_max = (
            retry_max if retry_max is not None else self.settings.api_retry_max
        )
        if self.retry_max < 0:
            raise ValueError("retry_max cannot be negative")

        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "User-Agent": "ShiftHub/0.1 (+shifts-api-client)",
                "Accept": "application/json",
            }
        )

        logger.info(
            "Shifts API transport initialized",
            extra={
                "base_url": sanitize_url_for_logging(self.base_url),
                "timeout": self.timeout,
                "retry_max": self.retry_max,
            },
        )

    def _backoff(self, attempt: int, reason: str) -> None:
        # Exponential backoff with jitter
        delay = (2**attempt) * (0.8 + 0.4 * random.random())
        logger.debug(f"Retrying after {delay:.1f}s due to {reason}")
        time.sleep(delay)

    def _make_request(self, method: str, url: str, **kwargs) -> requests.Response:
        """
        Make HTTP request with retry logic and error handling.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Request URL
            **kwargs: Additional arguments for requests

        Returns:
            Response object for successful requests

        Raises:
            ShiftsApiNotFoundError: For 404 not found errors
            ShiftsApiClientError: For other HTTP errors or request failures
        """
        sanitized_url = sanitize_url_for_logging(url)

        for attempt in range(self.retry_max + 1):
            try:
                logger.debug(
                    "Making shifts API request",
                    extra={
                        "method": method,
                        "url": sanitized_url,
                        "attempt": attempt + 1,
                        "max_attempts": self.retry_max + 1,
                    },
                )

                response = self.session.request(
                    method, url, timeout=self.timeout, **kwargs
                )
            except requests.RequestException as e:
                logger.warning(
                    "Shifts API request failed",
                    extra={
                        "url": sanitized_url,
                        "error": str(e),
                        "attempt": attempt + 1,
                    },
                )
                if attempt < self.retry_max:
                    self._backoff(attempt, "request error")
                    continue
                raise ShiftsApiClientError(
                    f"Request to {sanitized_url} failed after "
                    f"{self.retry_max + 1} attempts: {e}"
                ) from e

            if 200 <= response.status_code < 300:
                logger.debug(
                    "Shifts API request successful",
                    extra={"url": sanitized_url, "status_code": response.status_code},
                )
                return response

            elif response.status_code == 404:
                logger.warning(
                    "Shifts API resource not found",
                    extra={"url": sanitized_url, "status_code": response.status_code},
                )
                raise ShiftsApiNotFoundError(f"Resource not found: {sanitized_url}")

            elif response.status_code >= 500:
                logger.warning(
                    "Shifts API server error",
                    extra={
                        "url": sanitized_url,
                        "status_code": response.status_code,
                        "attempt": attempt + 1,
                    },
                )
                if attempt < self.retry_max:
                    self._backoff(attempt, "server error")
                    continue
                raise ShiftsApiClientError(
                    f"Server error from {sanitized_url}: {response.status_code}"
                )

            else:
                logger.error(
                    "Unexpected shifts API response",
                    extra={"url": sanitized_url, "status_code": response.status_code},
                )
                raise ShiftsApiClientError(
                    f"Unexpected status code from {sanitized_url}: "
                    f"{response.status_code}"
                )

        # Should not reach here, but for completeness
        raise ShiftsApiClientError("Request failed for unknown reason")
