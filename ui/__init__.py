"""
ui/
---
Presentation layer.

    from ui import render_bars
    from ui import slide_panel, playback_controls, quiz_panel, …
"""

from ui.canvas import render_bars, bar_role, CanvasConfig

from ui.controls import (
    mode_nav,
    slide_panel,
    playback_controls,
    legend,
    analytics_panel,
    pseudocode_viewer,
    explanation_panel,
    quiz_panel,
    quiz_summary,
)

__all__ = [
    "render_bars",
    "bar_role",
    "CanvasConfig",
    "mode_nav",
    "slide_panel",
    "playback_controls",
    "legend",
    "analytics_panel",
    "pseudocode_viewer",
    "explanation_panel",
    "quiz_panel",
    "quiz_summary",
]
