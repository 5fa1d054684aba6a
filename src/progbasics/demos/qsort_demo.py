# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the progbasics project.
# Licensed under the MIT License – see LICENSE in the repo root.

# demos/qsort_demo.py
from __future__ import annotations

from progbasics.core.properties import check_sorted
from progbasics.core.qsort import qsort

DEFAULT_INPUTS = [
    [3, 2, 4, 1, 6, 5, 9],
    [2, 4, 6, 3, 1, 5],
    [2, 1],
]


def main(values: list | None = None) -> list[list]:
    inputs = DEFAULT_INPUTS if values is None else [values]

    results = []
    for nums in inputs:
        before = list(nums)
        out = list(nums)
        qsort(out)
        check_sorted(before, out)
        print(f"qsort: {before} -> {out}")
        results.append(out)
    return results


if __name__ == "__main__":
    main()
