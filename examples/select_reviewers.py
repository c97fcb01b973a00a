#!/usr/bin/env python3
"""
Basic reviewbot usage example.

Selects reviewers for a pull request whose approval policy is still pending.
Run with: python examples/select_reviewers.py OWNER REPO AUTHOR

Credentials come from the environment (GITHUB_TOKEN, or GITHUB_APP_ID,
GITHUB_APP_PRIVATE_KEY_PATH and GITHUB_INSTALLATION_ID).
"""

import logging
import random
import sys

from reviewbot import (
    AdminScope,
    EvaluationStatus,
    GitHubClient,
    GitHubContext,
    ReviewBotError,
    Result,
    ReviewRequestRule,
    configure_logging,
    find_random_requesters,
)

if len(sys.argv) != 4:
    print(__doc__)
    sys.exit(2)

owner, repo, author = sys.argv[1:]
configure_logging(level=logging.INFO, selection_level=logging.DEBUG)

print("=== reviewbot reviewer selection ===\n")

# 1. Describe the evaluated policy
print("1. Building policy result...")
result = Result(
    status=EvaluationStatus.PENDING,
    name="policy",
    children=[
        Result(
            status=EvaluationStatus.PENDING,
            name="two maintainers",
            review_request_rule=ReviewRequestRule(
                teams=[f"{owner}/maintainers"],
                write_collaborators=True,
                required_count=2,
            ),
        ),
        Result(
            status=EvaluationStatus.PENDING,
            name="an admin",
            review_request_rule=ReviewRequestRule(
                admins=True,
                admin_scope=AdminScope.USER,
                required_count=1,
            ),
        ),
        Result(status=EvaluationStatus.APPROVED, name="already approved"),
    ],
)
print(f"   Rules: {[child.name for child in result.children]}\n")

# 2. Select reviewers
print("2. Selecting reviewers...")
try:
    with GitHubClient.from_env() as client:
        prctx = GitHubContext(client, owner=owner, repo=repo, author=author)
        reviewers = find_random_requesters(prctx, result, random.Random())
except ReviewBotError as e:
    print(f"   Failed: {e}")
    sys.exit(1)

print(f"   Requested: {reviewers}")
print("\n=== Done ===")
