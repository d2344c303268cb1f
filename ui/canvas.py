"""
canvas.py — SVG Bar Chart Renderer
====================================
Pure rendering function: Snapshot → SVG string.

Each value becomes a vertical bar with its value above and its index
below.  Bar colour is a lookup on the bar's role in the snapshot:

    sorted      – index is in snapshot.sorted_indices
    swapping    – index is in the pair just swapped
    comparing   – index is in the pair under comparison
    unsorted    – everything else

Design decisions:
  - NO mutation.  The caller passes a frozen Snapshot and gets a string.
  - Heights scale to the largest value so any input fits the canvas.
"""

from typing import Dict

from algorithms.step import Checkpoint, Snapshot


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 760
    height: int = 360
    bg:     str = "#ffffff"

    # bar colors (role → fill)
    bar_colors: Dict[str, str] = {
        "unsorted":  "#9ca3af",   # grey
        "comparing": "#eab308",   # amber
        "swapping":  "#7f1d1d",   # maroon
        "sorted":    "#22c55e",   # green
    }

    # bar layout
    padding:        int = 32
    gap:            int = 14
    label_space:    int = 28      # room above/below bars for value/index labels
    bar_radius:     int = 4

    # labels
    value_color:    str = "#374151"
    value_size:     int = 13
    index_color:    str = "#9ca3af"
    index_size:     int = 11


CONFIG = CanvasConfig()


def bar_role(snapshot: Snapshot, index: int) -> str:
    """Which colour family the bar at `index` belongs to."""
    if index in snapshot.sorted_indices:
        return "sorted"
    if snapshot.comparing and index in snapshot.comparing:
        if snapshot.event is Checkpoint.SWAP:
            return "swapping"
        return "comparing"
    return "unsorted"


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(snapshot: Snapshot, config: CanvasConfig = CONFIG) -> str:
    """
    Returns an SVG string.

    Args:
        snapshot : The snapshot to draw.
        config   : Visual config.
    """

    w, h = config.width, config.height
    parts = [
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">'
    ]

    values = snapshot.values
    if not values:
        parts.append(
            f'<text x="{w / 2}" y="{h / 2}" text-anchor="middle" '
            f'fill="{config.index_color}">No values to sort</text>'
        )
        parts.append("</svg>")
        return "\n".join(parts)

    n          = len(values)
    usable_w   = w - 2 * config.padding - (n - 1) * config.gap
    bar_w      = max(4.0, usable_w / n)
    base_y     = h - config.label_space
    max_bar_h  = h - 2 * config.label_space - config.padding
    peak       = max(max(values), 1)

    for idx, value in enumerate(values):
        x     = config.padding + idx * (bar_w + config.gap)
        bar_h = max(2.0, max_bar_h * max(value, 0) / peak)
        y     = base_y - bar_h
        role  = bar_role(snapshot, idx)
        fill  = config.bar_colors[role]
        cx    = x + bar_w / 2

        parts.extend([
            f'<g class="bar {role}" data-index="{idx}">',
            f'  <rect x="{x:.1f}" y="{y:.1f}" width="{bar_w:.1f}" height="{bar_h:.1f}" '
            f'rx="{config.bar_radius}" fill="{fill}"/>',
            f'  <text x="{cx:.1f}" y="{y - 8:.1f}" text-anchor="middle" font-weight="700" '
            f'font-size="{config.value_size}" fill="{config.value_color}">{value}</text>',
            f'  <text x="{cx:.1f}" y="{base_y + 18:.1f}" text-anchor="middle" font-family="monospace" '
            f'font-size="{config.index_size}" fill="{config.index_color}">{idx}</text>',
            '</g>',
        ])

    parts.append("</svg>")
    return "\n".join(parts)
