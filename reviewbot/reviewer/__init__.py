"""Random reviewer selection for pending policy rules."""

from reviewbot.reviewer.admins import resolve_admins
from reviewbot.reviewer.candidates import build_candidates
from reviewbot.reviewer.leaves import find_reviewable_leaves
from reviewbot.reviewer.requesters import find_random_requesters
from reviewbot.reviewer.sampling import sample_unique

__all__ = [
    "find_random_requesters",
    "find_reviewable_leaves",
    "resolve_admins",
    "build_candidates",
    "sample_unique",
]
