# checklist/charts.py
"""Results-overview figure for the summary page."""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from checklist.stats import percentages

COLORS = {"yes": "#43a047", "no": "#e53935", "na": "#9e9e9e"}


def overview_figure(stats, labels: dict):
    """
    Single stacked bar of Yes / No / N/A shares.
    labels: {"yes": str, "no": str, "na": str} already localised.
    Caller closes the figure.
    """
    pct = percentages(stats)
    counts = {"yes": stats.yes, "no": stats.no, "na": stats.na}

    fig, ax = plt.subplots(figsize=(8, 1.4))
    left = 0
    for key in ("yes", "no", "na"):
        width = counts[key] / stats.total * 100 if stats.total else 0
        ax.barh([""], [width], left=left, color=COLORS[key], height=0.6,
                label=f"{labels[key]} ({pct[key]}%)")
        if width >= 8:
            ax.text(left + width / 2, 0, str(counts[key]), ha="center", va="center",
                    fontsize=9, color="white", fontweight="bold")
        left += width

    ax.set_xlim(0, 100)
    ax.set_yticks([])
    ax.set_xticks([0, 25, 50, 75, 100])
    ax.set_xticklabels(["0%", "25%", "50%", "75%", "100%"], fontsize=8)
    for side in ("top", "right", "left"):
        ax.spines[side].set_visible(False)
    ax.legend(loc="upper center", bbox_to_anchor=(0.5, -0.35), ncol=3, fontsize=8, frameon=False)
    plt.tight_layout()
    return fig
