"""Repository-related data models."""

from dataclasses import dataclass

from reviewbot.types.policy import Permission


@dataclass
class Collaborator:
    """Repository collaborator information."""

    login: str
    permission: Permission


@dataclass
class Team:
    """A team with access to a repository."""

    slug: str
    name: str
    permission: Permission
