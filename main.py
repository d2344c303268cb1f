"""
main.py — Bubble Sort Master Class Flask App
==============================================
The web server that powers the three teaching modes.

Routes:
  GET  /                          – main UI
  POST /api/mode                  – switch Learn / Visualizer / Assessment
  POST /api/slides/next           – next slide
  POST /api/slides/prev           – previous slide
  POST /api/slides/goto           – jump to slide N
  POST /api/visualizer/start      – start the sort animation
  POST /api/visualizer/reset      – abort and restore the original array
  POST /api/visualizer/randomize  – new array (new engine)
  GET  /api/visualizer/state      – advance the animation clock, current frame
  POST /api/quiz/load             – generate questions (or fall back)
  POST /api/quiz/answer           – answer the current question
  POST /api/quiz/skip             – skip the current question
  POST /api/quiz/next             – move to the next question / summary
  GET  /api/quiz/summary          – score so far
  POST /api/quiz/grade            – essay-style AI grading

State management:
  Each browser gets a random id in its Flask session.  The id keys an
  AppState held in memory (engines and quiz sessions are live objects,
  not serialisable).  Each AppState holds:
    • mode          – active tab
    • deck          – slide cursor
    • stepper       – the sort animation engine
    • metrics       – recorded analytics for the current run
    • quiz          – current QuizSession (None until loaded)
    • quiz_warning  – soft message when fallback questions are in use
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, Optional
import logging
import secrets
import sys
import os

from flask import Flask, jsonify, render_template_string, request, session

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import Config
from algorithms import PSEUDOCODE
from engine import Recorder, RunMetrics, Stepper, random_sequence
from lessons import SlideDeck
from quiz import GeminiProvider, QuizSession, load_questions
from ui import (
    render_bars,
    mode_nav,
    slide_panel,
    playback_controls,
    legend,
    analytics_panel,
    pseudocode_viewer,
    explanation_panel,
    quiz_panel,
)


logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.from_object(Config)
app.secret_key = Config.SECRET_KEY

provider = GeminiProvider(
    api_key=Config.GEMINI_API_KEY,
    model_name=Config.GEMINI_MODEL,
    question_count=Config.QUIZ_QUESTION_COUNT,
)

MODES = ("LEARN", "VISUALIZE", "ASSESS")
MIN_ARRAY, MAX_ARRAY = 2, 16


# ---------------------------------------------------------------------------
# Per-session State
# ---------------------------------------------------------------------------
@dataclass
class AppState:
    stepper:      Stepper
    mode:         str                   = "LEARN"
    deck:         SlideDeck             = field(default_factory=SlideDeck)
    metrics:      Optional[RunMetrics]  = None
    quiz:         Optional[QuizSession] = None
    quiz_warning: Optional[str]         = None


# browser id → AppState, least recently used first
_STATES: Dict[str, AppState] = OrderedDict()


def new_stepper(values) -> Stepper:
    return Stepper(values, delay=app.config["STEP_DELAY"])


def get_state() -> AppState:
    """
    Return this browser's AppState, creating it on first use.  Once
    MAX_SESSIONS states exist, the least recently used one is dropped.
    """
    sid = session.get("sid")
    if sid is not None and sid in _STATES:
        _STATES.move_to_end(sid)
        return _STATES[sid]

    sid = secrets.token_hex(16)
    session["sid"] = sid
    _STATES[sid] = AppState(stepper=new_stepper(app.config["INITIAL_ARRAY"]))
    logger.debug("new app state %s", sid)

    while len(_STATES) > app.config["MAX_SESSIONS"]:
        old_sid, old = _STATES.popitem(last=False)
        old.stepper.reset()
        logger.info("evicted app state %s", old_sid)
    return _STATES[sid]


def bad_request(message: str):
    return jsonify({"error": message}), 400


def visualizer_payload(state: AppState) -> dict:
    snap = state.stepper.current
    return {
        "svg":         render_bars(snap),
        "controls":    playback_controls(snap.state),
        "analytics":   analytics_panel(snap, state.metrics),
        "pseudocode":  pseudocode_viewer(PSEUDOCODE, snap.pseudocode_line),
        "explanation": explanation_panel(snap.explanation),
        "state":       snap.state.value,
        "snapshot":    snap.to_dict(),
    }


def quiz_payload(state: AppState) -> dict:
    quiz = state.quiz
    return {
        "quiz":     quiz_panel(quiz, state.quiz_warning),
        "warning":  state.quiz_warning,
        "result":   quiz.result.to_dict() if quiz and quiz.result else None,
        "finished": bool(quiz and quiz.show_summary),
    }


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    state = get_state()
    snap = state.stepper.current

    html = render_template_string(INDEX_TEMPLATE,
        mode=state.mode,
        nav=mode_nav(state.mode),
        slide=slide_panel(state.deck),
        svg=render_bars(snap),
        controls=playback_controls(snap.state),
        legend=legend(),
        analytics=analytics_panel(snap, state.metrics),
        pseudocode=pseudocode_viewer(PSEUDOCODE, snap.pseudocode_line),
        explanation=explanation_panel(snap.explanation),
        quiz=quiz_panel(state.quiz, state.quiz_warning),
        quiz_loaded=state.quiz is not None,
    )
    return html


@app.route("/api/mode", methods=["POST"])
def api_mode():
    mode = (request.get_json(silent=True) or {}).get("mode")
    if mode not in MODES:
        return bad_request(f"Unknown mode: {mode}")
    state = get_state()
    state.mode = mode
    return jsonify({"mode": mode, "nav": mode_nav(mode)})


# ---------------------------------------------------------------------------
# API: Slides
# ---------------------------------------------------------------------------
def slide_payload(deck: SlideDeck) -> dict:
    return {"slide": slide_panel(deck), "index": deck.index, "total": len(deck.slides)}


@app.route("/api/slides/next", methods=["POST"])
def api_slides_next():
    deck = get_state().deck
    deck.next()
    return jsonify(slide_payload(deck))


@app.route("/api/slides/prev", methods=["POST"])
def api_slides_prev():
    deck = get_state().deck
    deck.prev()
    return jsonify(slide_payload(deck))


@app.route("/api/slides/goto", methods=["POST"])
def api_slides_goto():
    deck = get_state().deck
    idx = (request.get_json(silent=True) or {}).get("index")
    try:
        deck.goto(int(idx))
    except (TypeError, ValueError, IndexError):
        return bad_request("Invalid slide index")
    return jsonify(slide_payload(deck))


# ---------------------------------------------------------------------------
# API: Visualizer
# ---------------------------------------------------------------------------
@app.route("/api/visualizer/start", methods=["POST"])
def api_visualizer_start():
    state = get_state()
    started = state.stepper.start()
    if started:
        state.metrics = Recorder().record(state.stepper.initial_values)
    return jsonify({"started": started, **visualizer_payload(state)})


@app.route("/api/visualizer/reset", methods=["POST"])
def api_visualizer_reset():
    state = get_state()
    state.stepper.reset()
    state.metrics = None
    return jsonify(visualizer_payload(state))


@app.route("/api/visualizer/randomize", methods=["POST"])
def api_visualizer_randomize():
    data = request.get_json(silent=True) or {}

    if "values" in data:
        values = data["values"]
        if not isinstance(values, list) or not all(
            isinstance(v, int) and not isinstance(v, bool) for v in values
        ):
            return bad_request("values must be a list of integers")
    else:
        try:
            size = int(data.get("size", len(app.config["INITIAL_ARRAY"])))
        except (TypeError, ValueError):
            return bad_request("size must be an integer")
        if not MIN_ARRAY <= size <= MAX_ARRAY:
            return bad_request(f"Array length must be between {MIN_ARRAY} and {MAX_ARRAY}")
        values = random_sequence(size, seed=data.get("seed"))

    if not MIN_ARRAY <= len(values) <= MAX_ARRAY:
        return bad_request(f"Array length must be between {MIN_ARRAY} and {MAX_ARRAY}")

    state = get_state()
    state.stepper.reset()
    state.stepper = new_stepper(values)
    state.metrics = None
    return jsonify(visualizer_payload(state))


@app.route("/api/visualizer/state")
def api_visualizer_state():
    state = get_state()
    state.stepper.tick()
    return jsonify(visualizer_payload(state))


# ---------------------------------------------------------------------------
# API: Quiz
# ---------------------------------------------------------------------------
@app.route("/api/quiz/load", methods=["POST"])
async def api_quiz_load():
    state = get_state()
    questions, warning = await load_questions(provider)
    state.quiz = QuizSession(questions)
    state.quiz_warning = warning
    return jsonify({"count": len(questions), **quiz_payload(state)})


def open_quiz(state: AppState):
    """Error response if there is no quiz to answer, else None."""
    if state.quiz is None:
        return bad_request("Quiz not loaded")
    if state.quiz.show_summary:
        return bad_request("Quiz already finished")
    return None


@app.route("/api/quiz/answer", methods=["POST"])
def api_quiz_answer():
    state = get_state()
    error = open_quiz(state)
    if error:
        return error
    option = (request.get_json(silent=True) or {}).get("option_index")
    try:
        state.quiz.submit(int(option))
    except (TypeError, ValueError):
        return bad_request("Invalid option index")
    return jsonify(quiz_payload(state))


@app.route("/api/quiz/skip", methods=["POST"])
def api_quiz_skip():
    state = get_state()
    error = open_quiz(state)
    if error:
        return error
    state.quiz.skip()
    return jsonify(quiz_payload(state))


@app.route("/api/quiz/next", methods=["POST"])
def api_quiz_next():
    state = get_state()
    if state.quiz is None:
        return bad_request("Quiz not loaded")
    if not state.quiz.next_question():
        return bad_request("Answer or skip the current question first")
    return jsonify(quiz_payload(state))


@app.route("/api/quiz/summary")
def api_quiz_summary():
    state = get_state()
    if state.quiz is None:
        return bad_request("Quiz not loaded")
    return jsonify(state.quiz.summary().to_dict())


@app.route("/api/quiz/grade", methods=["POST"])
async def api_quiz_grade():
    data = request.get_json(silent=True) or {}
    question = data.get("question")
    answer = data.get("answer")
    if not isinstance(question, str) or not isinstance(answer, str) or not question.strip():
        return bad_request("question and answer are required")
    grade = await provider.evaluate_answer(question, answer, str(data.get("context", "")))
    return jsonify(grade.to_dict())


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>BubbleSort Master Class</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg: #f9fafb;
      --bg-panel: #ffffff;
      --border: #e5e7eb;
      --text-primary: #111827;
      --text-secondary: #4b5563;
      --text-muted: #9ca3af;
      --maroon: #7f1d1d;
      --maroon-soft: #fef2f2;
      --amber: #eab308;
      --green: #22c55e;
      --grey: #9ca3af;
      --red: #b91c1c;
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg);
      color: var(--text-primary);
      display: flex;
      min-height: 100vh;
    }

    /* Sidebar */
    #sidebar {
      width: 280px;
      background: var(--bg-panel);
      border-right: 1px solid var(--border);
      padding: 32px 20px;
      position: sticky;
      top: 0;
      height: 100vh;
    }
    #sidebar h1 { font-size: 20px; }
    #sidebar .subtitle { font-size: 12px; color: var(--text-muted); margin-bottom: 24px; display: block; }

    #mode-nav { display: flex; flex-direction: column; gap: 8px; }
    .nav-btn {
      text-align: left;
      padding: 12px 16px;
      border: none;
      border-radius: 12px;
      background: transparent;
      color: var(--text-secondary);
      font-size: 15px;
      cursor: pointer;
    }
    .nav-btn.active { background: var(--maroon-soft); color: var(--maroon); font-weight: 700; }

    .tip {
      margin-top: 32px;
      background: #111827;
      color: #fff;
      border-radius: 12px;
      padding: 16px;
      font-size: 12px;
    }

    /* Main area */
    #main { flex: 1; padding: 32px; max-width: 1100px; margin: 0 auto; }
    .mode-section { display: none; }
    .mode-section.active { display: block; }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 24px;
      margin-bottom: 16px;
    }
    .panel h3 { margin-bottom: 12px; }
    .panel p { color: var(--text-secondary); line-height: 1.7; margin-bottom: 8px; }
    .placeholder { color: var(--text-muted); }

    button {
      font-family: inherit;
      padding: 10px 18px;
      border-radius: 8px;
      border: 1px solid var(--border);
      background: #fff;
      cursor: pointer;
    }
    button:disabled { opacity: 0.5; cursor: not-allowed; }
    .btn-primary { background: var(--maroon); color: #fff; border-color: var(--maroon); }

    /* Slides */
    .slide-position { font-size: 12px; color: var(--text-muted); margin-bottom: 8px; }
    .key-points { margin: 16px 0 0 20px; line-height: 1.8; }
    .slide-footer { display: flex; justify-content: space-between; align-items: center; margin-top: 24px; }
    .dots .dot { display: inline-block; width: 8px; height: 8px; border-radius: 4px; background: var(--border); margin: 0 3px; }
    .dots .dot.active { background: var(--maroon); width: 20px; }

    /* Visualizer */
    #canvas-svg { display: flex; justify-content: center; margin-bottom: 16px; }
    .button-row { display: flex; gap: 12px; justify-content: center; }
    .finished-badge { padding: 10px 18px; border-radius: 8px; background: var(--green); color: #fff; font-weight: 700; }
    .legend { display: flex; gap: 20px; justify-content: center; font-size: 13px; margin-bottom: 16px; }
    .swatch { display: inline-block; width: 14px; height: 14px; border-radius: 3px; margin-right: 6px; vertical-align: middle; }
    .swatch.unsorted { background: var(--grey); }
    .swatch.comparing { background: var(--amber); }
    .swatch.swapping { background: var(--maroon); }
    .swatch.sorted { background: var(--green); }

    #bottom-panel { display: grid; grid-template-columns: 1fr 1fr 1fr; gap: 16px; }
    .code-block { font-family: 'JetBrains Mono', monospace; font-size: 13px; line-height: 1.6; }
    .code-line { padding: 2px 8px; border-radius: 4px; white-space: pre; }
    .code-line.highlight { background: var(--maroon-soft); border-left: 3px solid var(--maroon); }
    .explanation-text { color: var(--text-secondary); line-height: 1.8; font-size: 14px; }
    .analytics-panel td { padding: 2px 8px 2px 0; }

    /* Quiz */
    .warning { background: #fffbeb; color: #92400e; border-radius: 8px; padding: 8px 12px; margin-bottom: 12px; font-size: 13px; }
    .quiz-progress { font-size: 12px; color: var(--text-muted); margin-bottom: 8px; }
    .options { display: flex; flex-direction: column; gap: 8px; margin: 16px 0; }
    .option { text-align: left; }
    .option.correct { background: #f0fdf4; border-color: var(--green); }
    .option.incorrect { background: #fef2f2; border-color: var(--red); }
    .feedback { border-radius: 8px; padding: 12px; margin-bottom: 12px; }
    .feedback.correct { background: #f0fdf4; }
    .feedback.incorrect { background: #fef2f2; }
    .feedback.skipped { background: #f3f4f6; }
    .feedback .context { font-size: 13px; }
    .stats { display: flex; gap: 16px; margin: 16px 0; }
    .stat { flex: 1; text-align: center; padding: 12px; border-radius: 8px; background: #f9fafb; }
    .stat strong { display: block; font-size: 24px; }
    .final-score { background: #0f172a; color: #fff; border-radius: 12px; padding: 16px; text-align: center; margin-bottom: 16px; }
    .final-score strong { display: block; font-size: 36px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <h1>BubbleSort</h1>
    <span class="subtitle">Master Class</span>
    <div id="nav">{{ nav|safe }}</div>
    <div class="tip">
      <strong>Pro Tip</strong>
      <p>Remember: Bubble sort is O(N²) which makes it slow for large data sets!</p>
    </div>
  </div>

  <div id="main">
    <section class="mode-section {{ 'active' if mode == 'LEARN' else '' }}" data-mode="LEARN">
      <h2>Learning Mode</h2>
      <div id="slide">{{ slide|safe }}</div>
    </section>

    <section class="mode-section {{ 'active' if mode == 'VISUALIZE' else '' }}" data-mode="VISUALIZE">
      <h2>Visualizer</h2>
      <div id="canvas-svg">{{ svg|safe }}</div>
      {{ legend|safe }}
      <div id="controls">{{ controls|safe }}</div>
      <div id="bottom-panel">
        <div class="panel">
          <h3>Pseudocode</h3>
          <div id="pseudocode">{{ pseudocode|safe }}</div>
        </div>
        <div class="panel">
          <h3>Step Explanation</h3>
          <div id="explanation">{{ explanation|safe }}</div>
        </div>
        <div id="analytics">{{ analytics|safe }}</div>
      </div>
    </section>

    <section class="mode-section {{ 'active' if mode == 'ASSESS' else '' }}" data-mode="ASSESS">
      <h2>Assessment</h2>
      <div id="quiz" data-loaded="{{ 'yes' if quiz_loaded else 'no' }}">{{ quiz|safe }}</div>
    </section>
  </div>

  <script>
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function setHTML(id, html) {
      if (html !== undefined && html !== null) document.getElementById(id).innerHTML = html;
    }

    // Mode navigation
    async function switchMode(mode) {
      const data = await post('/api/mode', {mode: mode});
      setHTML('nav', data.nav);
      document.querySelectorAll('.mode-section').forEach(s => {
        s.classList.toggle('active', s.dataset.mode === mode);
      });
      const quiz = document.getElementById('quiz');
      if (mode === 'ASSESS' && quiz.dataset.loaded !== 'yes') loadQuiz();
    }

    // Slides
    async function slide(url, body) {
      const data = await post(url, body);
      setHTML('slide', data.slide);
    }

    // Visualizer
    let poller = null;

    function renderVisualizer(data) {
      setHTML('canvas-svg', data.svg);
      setHTML('controls', data.controls);
      setHTML('analytics', data.analytics);
      setHTML('pseudocode', data.pseudocode);
      setHTML('explanation', data.explanation);
      if (data.state === 'running' && !poller) {
        poller = setInterval(pollVisualizer, 100);
      } else if (data.state !== 'running' && poller) {
        clearInterval(poller);
        poller = null;
      }
    }

    async function pollVisualizer() {
      const res = await fetch('/api/visualizer/state');
      renderVisualizer(await res.json());
    }

    // Quiz
    async function loadQuiz() {
      const quiz = document.getElementById('quiz');
      quiz.dataset.loaded = 'yes';
      quiz.innerHTML = '<div class="panel"><p class="placeholder">Generating questions...</p></div>';
      const data = await post('/api/quiz/load');
      setHTML('quiz', data.quiz);
    }

    async function quizAction(url, body) {
      const data = await post(url, body);
      setHTML('quiz', data.quiz);
    }

    document.addEventListener('click', (e) => {
      const btn = e.target.closest('button');
      if (!btn || btn.disabled) return;

      if (btn.dataset.mode) return switchMode(btn.dataset.mode);
      if (btn.id === 'btn-slide-next') return slide('/api/slides/next');
      if (btn.id === 'btn-slide-prev') return slide('/api/slides/prev');

      if (btn.id === 'btn-start') return post('/api/visualizer/start').then(renderVisualizer);
      if (btn.id === 'btn-reset') return post('/api/visualizer/reset').then(renderVisualizer);
      if (btn.id === 'btn-randomize') return post('/api/visualizer/randomize').then(renderVisualizer);

      if (btn.dataset.option !== undefined) return quizAction('/api/quiz/answer', {option_index: +btn.dataset.option});
      if (btn.id === 'btn-skip') return quizAction('/api/quiz/skip');
      if (btn.id === 'btn-next-question') return quizAction('/api/quiz/next');
      if (btn.id === 'btn-retake') return loadQuiz();
    });

    if (document.querySelector('.mode-section.active').dataset.mode === 'ASSESS'
        && document.getElementById('quiz').dataset.loaded !== 'yes') {
      loadQuiz();
    }
    pollVisualizer();
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    print("=" * 60)
    print("  BubbleSort Master Class")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)
