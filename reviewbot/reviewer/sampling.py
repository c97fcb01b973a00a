"""Uniform random selection without replacement."""

import random

from reviewbot.exceptions import SamplingError

# Each pick may take up to this many draws per requested value
MAX_ATTEMPTS_FACTOR = 5


def sample_unique(n: int, candidates: list[str], rng: random.Random) -> list[str]:
    """
    Select n random values from candidates without reuse.

    When n covers the whole list, the list is returned as given.

    Args:
        n: Number of values to select
        candidates: Values to choose from
        rng: Random source owned by the caller

    Returns:
        The selected values, in draw order

    Raises:
        SamplingError: If a single pick fails to find an unused value
            within 5 * n draws
    """
    if n <= 0:
        return []
    if n >= len(candidates):
        return candidates

    max_attempts = n * MAX_ATTEMPTS_FACTOR
    selected: set[int] = set()
    selections: list[str] = []
    while len(selections) < n:
        for _ in range(max_attempts):
            index = rng.randrange(len(candidates))
            if index not in selected:
                break
        else:
            raise SamplingError(n, len(candidates))

        selected.add(index)
        selections.append(candidates[index])

    return selections
