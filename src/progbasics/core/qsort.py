# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the progbasics project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/progbasics/core/qsort.py
from __future__ import annotations

from typing import Any, MutableSequence, Union

import numpy as np

__all__ = ["partition", "qsort"]

Sortable = Union[MutableSequence[Any], np.ndarray]


def partition(seq: Sortable, start: int, end: int) -> int:
    """
    Partition seq[start:end] around its first element and return the pivot index.

    Every element strictly less than the pivot is moved in front of it by
    shifting the block [pivot_pos, scan) one slot to the right, so smaller
    elements keep their relative order. Elements equal to the pivot stay on
    its right-hand side.

    The range must be non-empty (``end - start >= 1``); bounds are not checked
    here, ``qsort`` validates them before calling in.
    """
    pivot_pos = start
    for scan in range(start + 1, end):
        if seq[scan] < seq[pivot_pos]:
            value = seq[scan]
            for j in range(scan, pivot_pos, -1):
                seq[j] = seq[j - 1]
            seq[pivot_pos] = value
            pivot_pos += 1
    return pivot_pos


def qsort(seq: Sortable, start: int = 0, end: int | None = None) -> None:
    """
    Sort seq[start:end] in place into non-decreasing order.

    Pivot is always the first element of the current range, so sorted and
    reverse-sorted inputs take quadratic time. Ranges of length 0 or 1 are
    left untouched; elements outside [start, end) are never moved.

    Parameters
    ----------
    seq : mutable sequence
        Anything supporting ``len``, ``seq[i]`` and ``seq[i] = v`` with
        mutually comparable elements (list, array.array, 1-D ndarray).
    start, end : int
        Half-open range to sort; ``end=None`` means ``len(seq)``.

    Raises
    ------
    IndexError
        If the range does not lie within ``seq``.
    """
    n = len(seq)
    if end is None:
        end = n
    if not 0 <= start <= end <= n:
        raise IndexError(f"invalid range [{start}, {end}) for sequence of length {n}")

    # Recurse into the smaller side and loop on the larger one: stack depth O(log n).
    while end - start > 1:
        pivot_pos = partition(seq, start, end)
        if pivot_pos - start < end - pivot_pos - 1:
            qsort(seq, start, pivot_pos)
            start = pivot_pos + 1
        else:
            qsort(seq, pivot_pos + 1, end)
            end = pivot_pos
