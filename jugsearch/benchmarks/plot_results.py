# jugsearch/benchmarks/plot_results.py
from __future__ import annotations
import io
import json
import math
from pathlib import Path
import matplotlib.pyplot as plt

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"
OUT_DIR = HERE

def _load_rows(path: Path = RESULTS_JSON):
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m jugsearch.benchmarks.run_all")
    data = json.loads(path.read_text())
    rows = data.get("results", [])
    if not rows:
        raise SystemExit("No rows to plot.")
    return rows

def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)

def _bar(ax, rows, metric, title, ylabel):
    labels = [r["config"] for r in rows]
    vals = [r.get(metric) or 0 for r in rows]

    x = list(range(len(labels)))
    ax.bar(x, vals, color=["tab:blue" if r.get("success") else "tab:red" for r in rows])
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=20, ha="right")

    # Value labels on top of bars; failed runs are marked instead of valued
    top = max(vals) or 1
    for xi, v, r in zip(x, vals, rows):
        label = f"{v}" if r.get("success") else "none"
        ax.text(xi, v + 0.01 * top, label, ha="center", va="bottom", fontsize=8)

def fmt_table(rows):
    # Markdown table
    lines = [
        "| Jugs | Solved | Depth | Nodes Expanded | States Generated | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, (int, float)) and not isinstance(x, bool):
            return f"{x:.6f}" if isinstance(x, float) else f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['config']} | {'yes' if r.get('success') else 'no'} | {fnum(r.get('depth'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('states_generated'))} | "
            f"{fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def fig_to_png_bytes(fig):
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()

def main():
    plt.switch_backend("Agg")
    rows = _load_rows(RESULTS_JSON)

    md_path = OUT_DIR / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")

    for metric, title, ylabel, fname in (
        ("nodes_expanded", "Nodes Expanded", "nodes", "nodes_expanded.png"),
        ("depth", "Solution Depth (moves)", "moves", "depth.png"),
    ):
        fig, ax = plt.subplots(figsize=(6, 4))
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        (OUT_DIR / fname).write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        print(f"Wrote {OUT_DIR / fname}")

if __name__ == "__main__":
    main()
