"""reviewbot - random reviewer selection for pull request approval policies."""

from reviewbot.auth import AppInstallationAuth, Auth, TokenAuth
from reviewbot.client import GitHubClient
from reviewbot.context import GitHubContext, RepositoryContext
from reviewbot.exceptions import (
    AggregationError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DirectoryLookupError,
    NotFoundError,
    RateLimitedError,
    ReviewBotError,
    SamplingError,
    ServerError,
    UnsupportedScopeError,
    ValidationError,
)
from reviewbot.logging import configure_logging, get_logger
from reviewbot.reviewer import (
    build_candidates,
    find_random_requesters,
    find_reviewable_leaves,
    resolve_admins,
    sample_unique,
)
from reviewbot.signers import RS256Signer, Signer
from reviewbot.signing import build_app_jwt
from reviewbot.transport import HTTPTransport, RetryConfig
from reviewbot.types import (
    AdminScope,
    EvaluationStatus,
    Permission,
    Result,
    ReviewRequestRule,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Reviewer selection
    "find_random_requesters",
    "find_reviewable_leaves",
    "resolve_admins",
    "build_candidates",
    "sample_unique",
    # Policy types
    "AdminScope",
    "EvaluationStatus",
    "Permission",
    "Result",
    "ReviewRequestRule",
    # Context
    "RepositoryContext",
    "GitHubContext",
    # GitHub client
    "GitHubClient",
    "Auth",
    "TokenAuth",
    "AppInstallationAuth",
    "Signer",
    "RS256Signer",
    "build_app_jwt",
    # Exceptions
    "ReviewBotError",
    "ConfigurationError",
    "DirectoryLookupError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "AggregationError",
    "UnsupportedScopeError",
    "SamplingError",
    # Transport
    "HTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
