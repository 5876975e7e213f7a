from __future__ import annotations
from typing import List
import math
import matplotlib.pyplot as plt

from ..core.analytics import Heatmap


def radar_chart(labels: List[str], scores: List[int], max_score: int = 10):
    """One spoke per competency, clockwise from twelve o'clock, radius 0..max_score."""
    if len(labels) != len(scores):
        raise ValueError("labels and scores must match length")

    step = 360.0 / len(labels)
    spokes = [i * step for i in range(len(labels))]
    # repeat the first point so the outline is closed
    theta = [math.radians(d) for d in spokes + spokes[:1]]
    radius = list(scores) + list(scores[:1])

    fig, ax = plt.subplots(figsize=(6, 6), subplot_kw={"projection": "polar"})
    ax.set_theta_zero_location("N")
    ax.set_theta_direction(-1)
    ax.set_thetagrids(spokes, labels, fontsize=8)
    ax.set_rlim(0, max_score)
    ax.set_rticks(range(0, max_score + 1, max(1, max_score // 5)))
    ax.plot(theta, radius, linewidth=2)
    ax.fill(theta, radius, alpha=0.2)
    return fig


def heatmap_figure(heatmap: Heatmap, max_score: int = 10):
    """Competencies down, (case study / group) across; empty cells are left blank."""
    rows = list(heatmap.cells.keys())
    data = [
        [heatmap.cells[r].get(col, float("nan")) for col in heatmap.columns]
        for r in rows
    ]

    fig, ax = plt.subplots(figsize=(max(6, 1.2 * len(heatmap.columns) + 4), 6))
    im = ax.imshow(data, cmap="RdYlGn", vmin=0, vmax=max_score, aspect="auto")
    ax.set_xticks(range(len(heatmap.columns)))
    ax.set_xticklabels(heatmap.columns, rotation=45, ha="right")
    ax.set_yticks(range(len(rows)))
    ax.set_yticklabels(rows)
    for i, row in enumerate(data):
        for j, v in enumerate(row):
            if not math.isnan(v):
                ax.text(j, i, f"{v:.1f}", ha="center", va="center", fontsize=8)
    fig.colorbar(im, ax=ax)
    fig.tight_layout()
    return fig
