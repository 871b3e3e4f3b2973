"""
Order helpers for the vocabulary list and flashcards.

Pure logic: no database access, no Flask.
"""

import random
from typing import List, MutableSequence, Optional, Sequence


def fisher_yates(items: MutableSequence, rng: random.Random, start: int = 0) -> None:
    """
    Shuffle ``items[start:]`` in place.

    For i from the last position down to ``start + 1``, swap element i with
    a uniformly chosen element at a position in ``[start, i]``.
    """
    for i in range(len(items) - 1, start, -1):
        j = rng.randint(start, i)
        items[i], items[j] = items[j], items[i]


def stabilize_order(prev: Sequence[int], nxt: Sequence[int]) -> List[int]:
    """
    Merge a freshly filtered pipeline into the previously displayed order.

    Indices present in both keep their relative order from ``prev``; indices
    only in ``nxt`` follow, in ``nxt`` order. Repeated indices in ``prev``
    are kept once.
    """
    if not prev:
        return list(nxt)

    wanted = set(nxt)
    seen = set()
    kept = []
    for i in prev:
        if i in wanted and i not in seen:
            seen.add(i)
            kept.append(i)

    missing = [i for i in nxt if i not in seen]
    return kept + missing


def merge_order(
    prev: Sequence[int],
    nxt: Sequence[int],
    mix: bool = False,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """
    Stabilize ``nxt`` against ``prev``; with ``mix`` the appended tail is shuffled.
    """
    result = stabilize_order(prev, nxt)
    if mix:
        kept_count = len(result) - _count_missing(prev, nxt)
        fisher_yates(result, rng or random.Random(), start=kept_count)
    return result


def _count_missing(prev: Sequence[int], nxt: Sequence[int]) -> int:
    prev_set = set(prev)
    return sum(1 for i in nxt if i not in prev_set)
