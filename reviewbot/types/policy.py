"""Policy evaluation data models.

These mirror the result tree produced by the approval policy engine. The
reviewer selection code only reads them.
"""

import enum
from dataclasses import dataclass, field


class EvaluationStatus(str, enum.Enum):
    """Outcome of evaluating one rule or rule group."""

    APPROVED = "approved"
    PENDING = "pending"
    DISAPPROVED = "disapproved"
    SKIPPED = "skipped"


class AdminScope(str, enum.Enum):
    """How widely "administrator" is resolved when admins are requested."""

    USER = "user"
    TEAM = "team"
    ORG = "org"


class Permission(str, enum.Enum):
    """Repository permission level of a user or team."""

    ADMIN = "admin"
    MAINTAIN = "maintain"
    WRITE = "write"
    TRIAGE = "triage"
    READ = "read"

    @classmethod
    def from_github(cls, value: str) -> "Permission":
        """
        Parse a permission as reported by the GitHub API.

        Accepts both role names ("write") and the legacy team
        permission names ("push", "pull").

        Raises:
            ValueError: If the value is not a known permission
        """
        legacy = {"push": cls.WRITE, "pull": cls.READ}
        normalized = value.strip().lower()
        if normalized in legacy:
            return legacy[normalized]
        return cls(normalized)


@dataclass
class ReviewRequestRule:
    """Who may be asked to review for a rule, and how many of them."""

    users: list[str] = field(default_factory=list)
    teams: list[str] = field(default_factory=list)  # "org/slug"
    organizations: list[str] = field(default_factory=list)
    write_collaborators: bool = False
    admins: bool = False
    admin_scope: AdminScope | str = AdminScope.USER
    required_count: int = 0


@dataclass
class Result:
    """A node in the policy evaluation result tree."""

    status: EvaluationStatus
    name: str = ""
    description: str = ""
    error: Exception | None = None
    children: list["Result | None"] = field(default_factory=list)
    review_request_rule: ReviewRequestRule = field(default_factory=ReviewRequestRule)
