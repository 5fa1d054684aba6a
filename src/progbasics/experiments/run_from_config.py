# src/progbasics/experiments/run_from_config.py
from __future__ import annotations
import argparse, sys, os, yaml

def run(method: str, outputs_dir: str, **kwargs):
    if method == "qsort":
        from progbasics.demos.qsort_demo import main as fn
        return fn(values=kwargs.get("values"))
    if method == "scaling":
        from progbasics.demos.scaling_demo import main as fn
        return fn(
            sizes=tuple(kwargs.get("sizes", (100, 200, 400, 800))),
            repeats=kwargs.get("repeats", 3),
            seed=kwargs.get("seed", 0),
            outputs_dir=outputs_dir,
        )
    raise SystemExit(f"Unknown method: {method}")

def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser(description="Run progbasics experiment from YAML config")
    ap.add_argument("--config", required=True, help="Path to YAML config")
    args = ap.parse_args(sys.argv[1:] if argv is None else argv)

    with open(args.config, "r", encoding="utf-8") as fh:
        cfg = yaml.safe_load(fh) or {}

    if "method" not in cfg:
        raise SystemExit("Missing 'method' in config")

    outputs_dir = cfg.get("outputs_dir", "outputs")
    os.makedirs(outputs_dir, exist_ok=True)

    method = cfg["method"]
    extras = {k: v for k, v in cfg.items() if k not in {"outputs_dir", "method"}}
    run(method=method, outputs_dir=outputs_dir, **extras)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
