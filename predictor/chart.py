from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from .series import PerformancePoint  # noqa: E402


def _save_plot(fig, path: str) -> str:
    fig.tight_layout()
    fig.savefig(path, dpi=160)
    plt.close(fig)
    return path


def plot_series(name: str, series: List[PerformancePoint], out_path: str | Path) -> Optional[str]:
    """Line chart of an opponent's cumulative average, y fixed to [-1, 1]."""
    if not series:
        return None

    labels = [pt.time_label for pt in series]
    values = [pt.cumulative_average for pt in series]
    positions = list(range(len(series)))

    fig, ax = plt.subplots(figsize=(7, 3.5))
    ax.plot(positions, values, color="#8884d8", marker="o", markersize=3, linewidth=2)
    ax.axhline(0.0, color="grey", linewidth=0.8, linestyle="--")
    ax.set_ylim(-1, 1)
    ax.set_xticks(positions)
    ax.set_xticklabels(labels, rotation=45, ha="right", fontsize=7)
    ax.grid(True, linestyle="--", alpha=0.4)
    ax.set_title(f"Performance vs {name}")
    ax.set_ylabel("Cumulative average")
    return _save_plot(fig, str(out_path))
