# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the progbasics project.
# Licensed under the MIT License – see LICENSE in the repo root.

# src/progbasics/cli.py
from __future__ import annotations

import argparse
import sys


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--outputs_dir", default="outputs", help="Path to outputs folder")


def cmd_qsort(args: argparse.Namespace) -> None:
    from progbasics.demos.qsort_demo import main

    main(values=args.values)


def cmd_scaling(args: argparse.Namespace) -> None:
    from progbasics.demos.scaling_demo import main

    main(
        sizes=tuple(args.sizes),
        repeats=args.repeats,
        seed=args.seed,
        outputs_dir=args.outputs_dir,
    )


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    p = argparse.ArgumentParser(prog="progbasics-demo", description="Run progbasics demos")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("qsort", help="In-place quicksort on the sample arrays")
    sp.add_argument("--values", type=int, nargs="+", default=None, help="Integers to sort")
    sp.set_defaults(func=cmd_qsort)

    sp = sub.add_parser("scaling", help="Time qsort on random, sorted and reversed inputs")
    _add_common(sp)
    sp.add_argument("--sizes", type=int, nargs="+", default=[100, 200, 400, 800])
    sp.add_argument("--repeats", type=int, default=3)
    sp.add_argument("--seed", type=int, default=0)
    sp.set_defaults(func=cmd_scaling)

    args = p.parse_args(argv)
    args.func(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
