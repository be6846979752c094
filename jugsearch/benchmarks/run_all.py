# jugsearch/benchmarks/run_all.py
from __future__ import annotations

import json
import logging
import os
import time
from pathlib import Path
from typing import List, Tuple

from ..algorithms.bfs import breadth_first_search
from ..core.errors import InvalidProblemError
from ..problems.jugs import JugsProblem

logger = logging.getLogger(__name__)

# ---- Tunables (overridable via environment variables) -----------------------
# "left,right,target" triples separated by ';'
JUG_CONFIGS = os.getenv("JUG_CONFIGS", "3,5,1;3,5,4;4,9,6;7,11,2;6,9,4")

# ---- Helpers ----------------------------------------------------------------
def fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def parse_configs(text: str) -> List[Tuple[int, int, int]]:
    configs = []
    for chunk in text.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = [p.strip() for p in chunk.split(",")]
        if len(parts) != 3:
            raise InvalidProblemError(f"bad jug config {chunk!r}; expected 'left,right,target'")
        try:
            left, right, target = (int(p) for p in parts)
        except ValueError:
            raise InvalidProblemError(f"bad jug config {chunk!r}; values must be integers") from None
        configs.append((left, right, target))
    return configs

def run(configs: List[Tuple[int, int, int]]):
    rows = []
    for left, right, target in configs:
        label = f"{left},{right}->{target}"
        print(f"→ Running BFS on jugs {label} ...")
        r = breadth_first_search(JugsProblem(capacities=(left, right), target=target))
        print(
            f"  {label}: "
            f"{'OK' if r.success else 'FAIL'} "
            f"depth={r.depth} "
            f"expanded={r.nodes_expanded}, "
            f"time={fmt_time(r.time_s)}s"
        )
        row = r.to_dict()
        row["config"] = label
        row["path"] = [list(s) for s in r.path]
        rows.append(row)
    return rows

def main():
    logging.basicConfig(level=logging.INFO)
    rows = run(parse_configs(JUG_CONFIGS))
    if not rows:
        raise SystemExit("No jug configurations given. Set JUG_CONFIGS, e.g. '3,5,1;4,9,6'.")

    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    # Save JSON next to this script
    out_path = Path(__file__).with_name("results.json")
    try:
        out_path.write_text(json.dumps(out, indent=2))
    except OSError as e:
        logger.warning("could not write %s: %s", out_path, e)

if __name__ == "__main__":
    main()
