"""Term frequency tally."""

from typing import Dict, Iterable


def frequency(terms: Iterable[str]) -> Dict[str, int]:
    """
    Tally occurrences of each distinct term.

    Keys are ordered by first occurrence. A plain dict is used so that an
    unseen term is absent rather than reported with a default count.
    """
    tally: Dict[str, int] = {}
    for term in terms:
        if term not in tally:
            tally[term] = 0
        tally[term] += 1
    return tally
