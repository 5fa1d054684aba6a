# src/progbasics/core/properties.py
from __future__ import annotations

from collections import Counter
from typing import Sequence

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "check_sorted",
]


def is_nondecreasing(xs: Sequence) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence) -> int | None:
    """Return the first index i where xs[i] > xs[i+1], or None if nondecreasing."""
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_permutation(a: Sequence, b: Sequence) -> bool:
    """Return True iff `a` and `b` hold exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def check_sorted(before: Sequence, after: Sequence) -> None:
    """
    Raise AssertionError unless `after` is a nondecreasing permutation of `before`.
    """
    if not is_permutation(before, after):
        raise AssertionError(f"Not a permutation of the input: {list(after)!r}")
    i = first_nondecreasing_violation_index(after)
    if i is not None:
        raise AssertionError(f"Not nondecreasing at i={i}: {after[i]!r} > {after[i + 1]!r}")
