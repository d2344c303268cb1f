"""
controls.py — UI Panels
========================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • mode_nav             – Learn / Visualizer / Assessment tabs
  • slide_panel          – current slide + prev/next footer
  • playback_controls    – start / reset / new array
  • legend               – bar colour key
  • analytics_panel      – live comparison & swap counts
  • pseudocode_viewer    – with live line highlighting
  • explanation_panel    – "why this step happened"
  • quiz_panel           – current question, options, feedback
  • quiz_summary         – final score card

Design:
  - All panels are stateless render functions.
  - State is passed in as arguments.
  - Output is raw HTML strings (no templating engine).
  - Text that came from the user or the AI provider is escaped.
  - The main app stitches them together.
"""

from typing import List, Optional

from markupsafe import escape

from algorithms.step import RunState, Snapshot
from algorithms.bubble_sort import expected_comparisons
from engine.recorder import RunMetrics
from lessons.slides import SlideDeck
from quiz.scoring import ScoreSummary
from quiz.session import QuizSession


MODES = [
    ("LEARN",     "Learn",      "🎓"),
    ("VISUALIZE", "Visualizer", "📊"),
    ("ASSESS",    "Assessment", "✅"),
]


# ---------------------------------------------------------------------------
# Mode Navigation
# ---------------------------------------------------------------------------
def mode_nav(active: str = "LEARN") -> str:
    buttons = []
    for key, label, icon in MODES:
        cls = "nav-btn active" if key == active else "nav-btn"
        buttons.append(f'<button class="{cls}" data-mode="{key}">{icon} {label}</button>')
    return f"""
    <nav id="mode-nav">
      {''.join(buttons)}
    </nav>
    """


# ---------------------------------------------------------------------------
# Slide Panel (Learn)
# ---------------------------------------------------------------------------
def slide_panel(deck: SlideDeck) -> str:
    slide = deck.current
    paragraphs = "".join(f"<p>{escape(p)}</p>" for p in slide.content)
    bullets = ""
    if slide.bullet_points:
        items = "".join(f"<li>{escape(b)}</li>" for b in slide.bullet_points)
        bullets = f'<ul class="key-points">{items}</ul>'

    dots = "".join(
        f'<span class="dot {"active" if i == deck.index else ""}"></span>'
        for i in range(len(deck.slides))
    )

    return f"""
    <div class="panel slide" data-slide="{slide.id}">
      <div class="slide-position">{deck.position}</div>
      <h3>{escape(slide.title)}</h3>
      {paragraphs}
      {bullets}
      <div class="slide-footer">
        <button id="btn-slide-prev" {'disabled' if deck.is_first else ''}>◀ Previous</button>
        <div class="dots">{dots}</div>
        <button id="btn-slide-next" class="btn-primary" {'disabled' if deck.is_last else ''}>Next ▶</button>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Playback Controls (Visualizer)
# ---------------------------------------------------------------------------
def playback_controls(state: RunState = RunState.IDLE) -> str:
    if state is RunState.RUNNING:
        start_btn = '<button id="btn-start" disabled>⏸ Sorting...</button>'
    elif state is RunState.FINISHED:
        start_btn = '<span class="finished-badge">FINISHED</span>'
    else:
        start_btn = '<button id="btn-start" class="btn-primary">▶ Start Sorting</button>'

    return f"""
    <div class="panel playback-controls">
      <div class="button-row">
        {start_btn}
        <button id="btn-reset">↺ Reset</button>
        <button id="btn-randomize" {'disabled' if state is RunState.RUNNING else ''}>🎲 New Array</button>
      </div>
    </div>
    """


def legend() -> str:
    return """
    <div class="legend">
      <span><i class="swatch unsorted"></i>Unsorted</span>
      <span><i class="swatch comparing"></i>Comparing</span>
      <span><i class="swatch swapping"></i>Swapping</span>
      <span><i class="swatch sorted"></i>Sorted</span>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(snapshot: Snapshot, metrics: Optional[RunMetrics] = None) -> str:
    n = len(snapshot.values)
    total = metrics.expected_comparisons if metrics else expected_comparisons(n)
    passes = snapshot.pass_number if snapshot.state is not RunState.IDLE else 0

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics</h3>
      <table>
        <tr><td>Pass:</td><td><strong>{passes} / {n}</strong></td></tr>
        <tr><td>Comparisons:</td><td><strong>{snapshot.comparisons} / {total}</strong></td></tr>
        <tr><td>Swaps:</td><td><strong>{snapshot.swaps}</strong>{f" / {metrics.swaps}" if metrics else ""}</td></tr>
        <tr><td>Sorted:</td><td><strong>{len(snapshot.sorted_indices)} of {n}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], current_line: int = -1) -> str:
    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    # explanations are generated by the sort itself and may carry <strong>
    if not explanation:
        explanation = "Watch how larger elements \"bubble\" to the right."
    return f"""<div class="explanation-text">{explanation}</div>"""


# ---------------------------------------------------------------------------
# Quiz Panel (Assess)
# ---------------------------------------------------------------------------
def quiz_panel(quiz: Optional[QuizSession], warning: Optional[str] = None) -> str:
    if quiz is None:
        return """
        <div class="panel quiz-panel">
          <p class="placeholder">Preparing your quiz...</p>
        </div>
        """
    if quiz.show_summary:
        return quiz_summary(quiz.summary())

    question = quiz.current_question
    result = quiz.result
    position, total = quiz.progress

    options = []
    for idx, option in enumerate(question.options):
        cls = "option"
        if result is not None:
            if idx == question.correct_option_index:
                cls += " correct"
            elif idx == result.option_index:
                cls += " incorrect"
        disabled = "disabled" if result is not None else ""
        options.append(
            f'<button class="{cls}" data-option="{idx}" {disabled}>{escape(option)}</button>'
        )

    if result is None:
        footer = '<button id="btn-skip">Skip Question ⏭</button>'
    else:
        status = result.status.value.lower()
        label = "Finish Quiz" if quiz.is_last else "Next Question"
        footer = f"""
        <div class="feedback {status}">
          <p>{escape(result.feedback)}</p>
          <p class="context">{escape(question.context)}</p>
        </div>
        <button id="btn-next-question" class="btn-primary">{label} ▶</button>
        """

    banner = f'<div class="warning">⚠ {escape(warning)}</div>' if warning else ""

    return f"""
    <div class="panel quiz-panel" data-question="{escape(question.id)}">
      {banner}
      <div class="quiz-progress">Question {position} of {total}</div>
      <h3>{escape(question.text)}</h3>
      <div class="options">{''.join(options)}</div>
      {footer}
    </div>
    """


def quiz_summary(summary: ScoreSummary) -> str:
    return f"""
    <div class="panel quiz-summary">
      <h3>🏆 Assessment Complete</h3>
      <div class="stats">
        <div class="stat correct"><strong>{summary.correct_count}</strong><span>Correct</span></div>
        <div class="stat incorrect"><strong>{summary.incorrect_count}</strong><span>Incorrect</span></div>
        <div class="stat skipped"><strong>{summary.skipped_count}</strong><span>Skipped</span></div>
      </div>
      <div class="final-score">
        <span>Final Score</span>
        <strong>{summary.raw_score:.2f}</strong>
        <small>(+1 Correct) | (-0.33 Incorrect if &gt; 2 errors)</small>
      </div>
      <button id="btn-retake" class="btn-primary">↻ Retake Quiz</button>
    </div>
    """
