"""Matplotlib static PNG renderer."""

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from geodash.models import STATUSES, Record
from geodash.renderers.plotly_map import STATUS_COLORS

_ROOT = Path(__file__).parent.parent.parent.parent


def render_static_map(
    records: Sequence[Record],
    selected_id: str | None = None,
    title: str = "",
    chart_size: int = 10,
) -> Figure:
    """Render records as a plate carrée scatter, coloured by status.

    Args:
        records: Records to plot.
        selected_id: Record to draw enlarged and labelled.
        title: Optional figure title.
        chart_size: Output width in inches (height is half).

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(chart_size, chart_size / 2))

    for status in STATUSES:
        group = [r for r in records if r.status == status and r.id != selected_id]
        if not group:
            continue
        lngs = np.array([r.longitude for r in group])
        lats = np.array([r.latitude for r in group])
        ax.scatter(lngs, lats, s=12, color=STATUS_COLORS[status], label=status, zorder=2)

    selected = next((r for r in records if r.id == selected_id), None)
    if selected is not None:
        ax.scatter(
            [selected.longitude], [selected.latitude],
            s=80, color="#d81b60", edgecolors="black", zorder=3,
        )
        ax.annotate(
            selected.name,
            (selected.longitude, selected.latitude),
            xytext=(6, 6),
            textcoords="offset points",
            fontsize=8,
        )

    ax.set_xlim(-180, 180)
    ax.set_ylim(-90, 90)
    ax.set_aspect("equal")
    ax.grid(color="#cccccc", linewidth=0.5, zorder=1)
    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    if title:
        ax.set_title(title)
    if records:
        ax.legend(loc="lower left", fontsize=8)

    return fig


def save_static_map(
    records: Sequence[Record],
    output_path: Path | None = None,
    selected_id: str | None = None,
    title: str = "",
) -> Path:
    """Save records as a PNG file.

    Args:
        records: Records to plot.
        output_path: Destination path. Auto-generated under results/ if None.
        selected_id: Record to highlight.
        title: Optional figure title (also used in the generated filename).

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        stamp = datetime.now().strftime("%Y_%m_%d_%H_%M_%S")
        label = title.replace(" ", "_") or "projects"
        output_path = _ROOT / "results" / f"{label}__{stamp}.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_map(records, selected_id=selected_id, title=title)
    fig.savefig(output_path, bbox_inches="tight")
    plt.close(fig)
    return output_path
