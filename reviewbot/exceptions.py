"""reviewbot exception classes."""



class ReviewBotError(Exception):
    """Base exception for all reviewbot errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(ReviewBotError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class DirectoryLookupError(ReviewBotError):
    """Raised when a user, team, or organization directory query fails."""

    def __init__(
        self,
        message: str,
        code: str = "LOOKUP_ERROR",
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)


class AuthenticationError(DirectoryLookupError):
    """Raised when the API rejects our credentials (401)."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        super().__init__(message, code, request_id)


class AuthorizationError(DirectoryLookupError):
    """Raised when access is denied (403)."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        super().__init__(message, code, request_id)


class NotFoundError(DirectoryLookupError):
    """Raised when a repository, team, or organization is not found."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        super().__init__(message, code, request_id)


class RateLimitedError(DirectoryLookupError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(message, code, request_id)
        self.retry_after = retry_after


class ValidationError(DirectoryLookupError):
    """Raised on other client errors (4xx)."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        super().__init__(message, code, request_id)


class ServerError(DirectoryLookupError):
    """Raised on server errors (5xx) and connection failures."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        super().__init__(message, code, request_id)


class AggregationError(ReviewBotError):
    """Raised when a required step of candidate assembly fails.

    The failing lookup is chained as ``__cause__``.
    """

    def __init__(self, message: str) -> None:
        super().__init__("AGGREGATION_ERROR", message)


class UnsupportedScopeError(ReviewBotError):
    """Raised for an admin scope outside of user, team, and org."""

    def __init__(self, scope: object) -> None:
        super().__init__("UNSUPPORTED_SCOPE", f"Unknown admin scope {scope!r}")
        self.scope = scope


class SamplingError(ReviewBotError):
    """Raised when random selection cannot find enough unique values.

    This signals a broken invariant in the caller, not a runtime condition.
    """

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            "SAMPLING_ERROR",
            f"Unable to select {requested} unique values from {available}",
        )
        self.requested = requested
        self.available = available
