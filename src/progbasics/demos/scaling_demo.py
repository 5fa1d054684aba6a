# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the progbasics project.
# Licensed under the MIT License – see LICENSE in the repo root.

# demos/scaling_demo.py
import os
import time

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from progbasics.core.properties import check_sorted
from progbasics.core.qsort import qsort

KINDS = ("random", "sorted", "reversed")


def make_input(kind: str, n: int, rng: np.random.Generator) -> list[int]:
    xs = rng.integers(0, 10 * n + 1, size=n).tolist()
    if kind == "sorted":
        xs.sort()
    elif kind == "reversed":
        xs.sort(reverse=True)
    elif kind != "random":
        raise ValueError(f"Unknown input kind: {kind}")
    return xs


def main(
    sizes: tuple[int, ...] = (100, 200, 400, 800),
    repeats: int = 3,
    seed: int = 0,
    outputs_dir: str = "outputs",
) -> pd.DataFrame:
    sizes = sorted(set(sizes))
    if not sizes:
        raise ValueError("At least one input size is required")
    rng = np.random.default_rng(seed)

    # --- Time qsort per size and input ordering ---
    rows = []
    for n in sizes:
        for kind in KINDS:
            best = float("inf")
            for _ in range(repeats):
                xs = make_input(kind, n, rng)
                before = list(xs)
                t0 = time.perf_counter()
                qsort(xs)
                best = min(best, time.perf_counter() - t0)
                check_sorted(before, xs)
            rows.append({"n": n, "kind": kind, "seconds": best})

    df = pd.DataFrame(rows, columns=["n", "kind", "seconds"])
    table = df.pivot(index="n", columns="kind", values="seconds")[list(KINDS)]
    for n, row in table.iterrows():
        print(
            f"qsort n={n}: random={row['random']:.4f}s, "
            f"sorted={row['sorted']:.4f}s, reversed={row['reversed']:.4f}s"
        )

    # --- Save table and plot ---
    os.makedirs(outputs_dir, exist_ok=True)
    df.to_csv(os.path.join(outputs_dir, "qsort_scaling.csv"), index=False)

    plt.figure(figsize=(6, 4))
    for kind in KINDS:
        plt.plot(table.index, table[kind], marker="o", label=kind)
    plt.xlabel("n")
    plt.ylabel("seconds (best of repeats)")
    plt.legend()
    plt.tight_layout()
    plt.savefig(os.path.join(outputs_dir, "qsort_scaling.pdf"), bbox_inches="tight")
    plt.close()
    return df


if __name__ == "__main__":
    main()
