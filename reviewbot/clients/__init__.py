"""GitHub resource clients."""

from reviewbot.clients.collaborators import CollaboratorsClient
from reviewbot.clients.orgs import OrgsClient
from reviewbot.clients.teams import TeamsClient

__all__ = [
    "CollaboratorsClient",
    "OrgsClient",
    "TeamsClient",
]
