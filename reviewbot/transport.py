"""
HTTP Transport for the GitHub REST API.

Handles HTTP communication with automatic retry logic, authentication,
pagination and error handling.
"""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from reviewbot.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DirectoryLookupError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from reviewbot.logging import log_http_request, log_http_response

if TYPE_CHECKING:
    from reviewbot.auth import Auth

API_VERSION = "2022-11-28"
PAGE_SIZE = 100


@dataclass
class RetryConfig:
    """Configuration for automatic retry behavior."""

    max_retries: int = 3
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 500, 502, 503])
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


class HTTPTransport:
    """
    HTTP transport layer with authentication and retry logic.

    Handles:
    - Authorization header from the configured Auth
    - Exponential backoff with jitter for retries
    - Retry-After header respect for rate limiting
    - Link header pagination
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        auth: "Auth",
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
        user_agent: str = "reviewbot",
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            auth: Provides the Authorization header for each request
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            user_agent: User-Agent header value
        """
        self.base_url = base_url.rstrip("/")
        self.auth = auth
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": user_agent,
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
        authorization: str | None = None,
    ) -> Any:
        """
        Make an authenticated request with automatic retry.

        Args:
            method: HTTP method
            path: API path (e.g., "/repos/octo/hello/teams") or absolute URL
            params: Query parameters
            body: JSON request body
            authorization: Authorization header overriding the configured Auth

        Returns:
            Parsed JSON response

        Raises:
            DirectoryLookupError: On API errors
        """
        response = self._send(method, path, params, body, authorization)
        if not response.content:
            return None
        return response.json()

    def paginate(self, path: str, params: dict[str, Any] | None = None) -> list[Any]:
        """
        GET every page of a list endpoint.

        Follows the Link header's "next" relation until it is absent.

        Args:
            path: API path of the list endpoint
            params: Query parameters for the first page

        Returns:
            Items of all pages, in order

        Raises:
            DirectoryLookupError: On API errors
        """
        items: list[Any] = []
        url: str | None = path
        page_params: dict[str, Any] | None = {"per_page": PAGE_SIZE, **(params or {})}

        while url is not None:
            response = self._send("GET", url, page_params, None, None)
            page = response.json()
            if not isinstance(page, list):
                raise ValidationError(
                    "UNEXPECTED_RESPONSE",
                    f"Expected a list from {url}, got {type(page).__name__}",
                )
            items.extend(page)

            # The next URL already carries the query string
            url = response.links.get("next", {}).get("url")
            page_params = None

        return items

    def _send(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None,
        body: dict[str, Any] | None,
        authorization: str | None,
    ) -> httpx.Response:
        def make_request() -> httpx.Response:
            headers = {"Authorization": authorization or self.auth.authorization(self)}
            log_http_request(method, url, headers=headers, params=params)

            started = time.monotonic()
            response = self._client.request(
                method, url, params=params, json=body, headers=headers
            )
            log_http_response(
                response.status_code,
                url,
                request_id=response.headers.get("X-GitHub-Request-Id"),
                elapsed_ms=(time.monotonic() - started) * 1000,
            )
            return response

        return self._execute_with_retry(make_request)

    def _execute_with_retry(
        self, request_fn: Callable[[], httpx.Response]
    ) -> httpx.Response:
        """
        Execute a request with automatic retry on retryable errors.

        Args:
            request_fn: Function that makes the HTTP request

        Returns:
            The successful response

        Raises:
            DirectoryLookupError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                response = request_fn()

                if response.status_code < 400:
                    return response

                # Parse error response
                error = self._parse_error_response(response)

                # Check if we should retry
                if not self._should_retry(response.status_code, attempt):
                    raise error

                last_error = error

                # Calculate backoff time
                retry_after = response.headers.get("Retry-After")
                wait_time = self._get_backoff_time(attempt, retry_after)
                time.sleep(wait_time)

            except httpx.RequestError as e:
                # Network errors are retryable
                if attempt >= self.retry_config.max_retries:
                    raise ServerError("CONNECTION_ERROR", str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                time.sleep(wait_time)

        # Should not reach here, but just in case
        if last_error:
            if isinstance(last_error, DirectoryLookupError):
                raise last_error
            raise ServerError("MAX_RETRIES_EXCEEDED", str(last_error))

        raise ServerError("UNKNOWN_ERROR", "Request failed with no error details")

    def _should_retry(self, status_code: int, attempt: int) -> bool:
        """
        Determine if a request should be retried.

        Args:
            status_code: HTTP status code
            attempt: Current attempt number (0-indexed)

        Returns:
            True if the request should be retried
        """
        if attempt >= self.retry_config.max_retries:
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(
        self, attempt: int, retry_after: str | None
    ) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass  # Fall through to exponential backoff

        # Exponential backoff: backoff_factor ^ attempt
        base_wait = self.retry_config.backoff_factor ** attempt

        # Apply jitter (±jitter%)
        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)

    def _parse_error_response(self, response: httpx.Response) -> DirectoryLookupError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate DirectoryLookupError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        message = data.get("message") or f"HTTP {status_code}"
        request_id = response.headers.get("X-GitHub-Request-Id")

        if status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, request_id)
        elif status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0":
            return RateLimitedError(
                "RATE_LIMITED", message, self._rate_limit_wait(response), request_id
            )
        elif status_code == 403:
            return AuthorizationError("FORBIDDEN", message, request_id)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, request_id)
        elif status_code == 429:
            return RateLimitedError(
                "RATE_LIMITED", message, self._rate_limit_wait(response), request_id
            )
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, request_id)
        else:
            return ValidationError("INVALID_REQUEST", message, request_id)

    @staticmethod
    def _rate_limit_wait(response: httpx.Response) -> int:
        """Seconds until the rate limit resets, defaulting to 60."""
        retry_after = response.headers.get("Retry-After")
        if retry_after is not None:
            try:
                return int(retry_after)
            except ValueError:
                pass

        reset = response.headers.get("X-RateLimit-Reset")
        if reset is not None:
            try:
                return max(int(reset) - int(time.time()), 0)
            except ValueError:
                pass

        return 60
