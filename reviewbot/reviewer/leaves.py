"""Pending leaf discovery in a policy result tree."""

from reviewbot.types.policy import EvaluationStatus, Result


def find_reviewable_leaves(result: Result) -> list[Result]:
    """
    Return the pending, error-free leaves of a result tree.

    Only pending children are descended into: a pending node below an
    approved, disapproved or skipped parent no longer needs reviewers.
    Leaves are returned depth-first, left to right.

    Args:
        result: Root of the evaluation tree

    Returns:
        Leaf results whose rules still need reviewers
    """
    if not result.children:
        if result.status == EvaluationStatus.PENDING and result.error is None:
            return [result]
        return []

    leaves: list[Result] = []
    for child in result.children:
        if child is None:
            continue
        if child.status == EvaluationStatus.PENDING:
            leaves.extend(find_reviewable_leaves(child))
    return leaves
