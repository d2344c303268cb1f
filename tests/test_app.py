"""
End-to-end tests for the Flask routes, driven through the test client.

STEP_DELAY is forced to 0 so every state poll resumes the run, and
the module-level provider is patched so no request reaches Gemini.
"""

import unittest
from unittest import mock

import main
from quiz import FALLBACK_WARNING, Question, QuestionProvider
from quiz.provider import Grade


class StubProvider(QuestionProvider):
    def __init__(self, questions=None, grade=None):
        self.questions = questions or []
        self.grade = grade

    async def generate_questions(self):
        return list(self.questions)

    async def evaluate_answer(self, question_text, user_answer, context):
        return self.grade or await super().evaluate_answer(question_text, user_answer, context)


GENERATED = [
    Question(id="g1", text="How many passes?", options=["N", "1"], correct_option_index=0, context="c1"),
    Question(id="g2", text="Stable?", options=["Yes", "No"], correct_option_index=0, context="c2"),
]


class AppTestCase(unittest.TestCase):

    def setUp(self):
        main.app.config["TESTING"] = True
        main.app.config["STEP_DELAY"] = 0
        main.app.config["INITIAL_ARRAY"] = [3, 1, 2]
        main.app.config["MAX_SESSIONS"] = 500
        main._STATES.clear()
        self.client = main.app.test_client()

    def tearDown(self):
        main._STATES.clear()


class TestPages(AppTestCase):

    def test_index(self):
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        html = resp.get_data(as_text=True)
        self.assertIn("BubbleSort Master Class", html)
        self.assertIn('data-mode="LEARN"', html)

    def test_mode_switch(self):
        resp = self.client.post("/api/mode", json={"mode": "VISUALIZE"})
        self.assertEqual(resp.get_json()["mode"], "VISUALIZE")
        self.assertEqual(self.client.post("/api/mode", json={"mode": "PLAY"}).status_code, 400)

    def test_slides(self):
        self.assertEqual(self.client.post("/api/slides/prev").get_json()["index"], 0)
        self.assertEqual(self.client.post("/api/slides/next").get_json()["index"], 1)
        data = self.client.post("/api/slides/goto", json={"index": 4}).get_json()
        self.assertEqual((data["index"], data["total"]), (4, 5))
        self.assertEqual(self.client.post("/api/slides/next").get_json()["index"], 4)
        self.assertEqual(self.client.post("/api/slides/goto", json={"index": 9}).status_code, 400)
        self.assertEqual(self.client.post("/api/slides/goto", json={}).status_code, 400)


class TestVisualizer(AppTestCase):

    def poll_until_finished(self, limit=50):
        for _ in range(limit):
            data = self.client.get("/api/visualizer/state").get_json()
            if data["state"] == "finished":
                return data
        self.fail("run never finished")

    def test_full_run(self):
        data = self.client.post("/api/visualizer/start").get_json()
        self.assertTrue(data["started"])
        self.assertEqual(data["state"], "running")
        self.assertEqual(data["snapshot"]["comparing"], [0, 1])

        data = self.poll_until_finished()
        snap = data["snapshot"]
        self.assertEqual(snap["values"], [1, 2, 3])
        self.assertEqual(snap["sorted_indices"], [0, 1, 2])
        self.assertEqual(snap["comparisons"], 3)
        self.assertIn("FINISHED", data["controls"])

    def test_second_start_is_rejected(self):
        self.client.post("/api/visualizer/start")
        data = self.client.post("/api/visualizer/start").get_json()
        self.assertFalse(data["started"])
        self.assertEqual(data["snapshot"]["step_number"], 0)

    def test_reset_restores_original(self):
        self.client.post("/api/visualizer/start")
        self.client.get("/api/visualizer/state")
        data = self.client.post("/api/visualizer/reset").get_json()
        self.assertEqual(data["state"], "idle")
        self.assertEqual(data["snapshot"]["values"], [3, 1, 2])
        self.assertIsNone(data["snapshot"]["comparing"])

        # polling an idle engine changes nothing
        data = self.client.get("/api/visualizer/state").get_json()
        self.assertEqual(data["state"], "idle")

    def test_randomize(self):
        data = self.client.post("/api/visualizer/randomize", json={"values": [5, 4]}).get_json()
        self.assertEqual(data["snapshot"]["values"], [5, 4])
        self.assertEqual(data["state"], "idle")

        a = self.client.post("/api/visualizer/randomize", json={"size": 6, "seed": 7}).get_json()
        b = self.client.post("/api/visualizer/randomize", json={"size": 6, "seed": 7}).get_json()
        self.assertEqual(len(a["snapshot"]["values"]), 6)
        self.assertEqual(a["snapshot"]["values"], b["snapshot"]["values"])

    def test_randomize_validation(self):
        post = lambda body: self.client.post("/api/visualizer/randomize", json=body).status_code
        self.assertEqual(post({"values": [1]}), 400)
        self.assertEqual(post({"values": [1, "2"]}), 400)
        self.assertEqual(post({"values": [True, 2]}), 400)
        self.assertEqual(post({"size": 40}), 400)
        self.assertEqual(post({"size": "many"}), 400)


class TestQuiz(AppTestCase):

    def test_routes_need_a_loaded_quiz(self):
        self.assertEqual(self.client.post("/api/quiz/answer", json={"option_index": 0}).status_code, 400)
        self.assertEqual(self.client.post("/api/quiz/skip").status_code, 400)
        self.assertEqual(self.client.post("/api/quiz/next").status_code, 400)
        self.assertEqual(self.client.get("/api/quiz/summary").status_code, 400)

    def test_fallback_when_provider_returns_nothing(self):
        with mock.patch.object(main, "provider", StubProvider()):
            data = self.client.post("/api/quiz/load").get_json()
        self.assertEqual(data["count"], 3)
        self.assertEqual(data["warning"], FALLBACK_WARNING)
        self.assertIn("Question 1 of 3", data["quiz"])

    def test_full_attempt(self):
        with mock.patch.object(main, "provider", StubProvider(GENERATED)):
            data = self.client.post("/api/quiz/load").get_json()
        self.assertEqual(data["count"], 2)
        self.assertIsNone(data["warning"])

        self.assertEqual(self.client.post("/api/quiz/next").status_code, 400)

        data = self.client.post("/api/quiz/answer", json={"option_index": 1}).get_json()
        self.assertFalse(data["result"]["isCorrect"])
        self.assertEqual(data["result"]["feedback"], "Incorrect. The correct answer is: N")

        # answer is locked in
        data = self.client.post("/api/quiz/answer", json={"option_index": 0}).get_json()
        self.assertFalse(data["result"]["isCorrect"])

        self.client.post("/api/quiz/next")
        self.assertEqual(
            self.client.post("/api/quiz/answer", json={"option_index": 7}).status_code, 400
        )
        data = self.client.post("/api/quiz/skip").get_json()
        self.assertEqual(data["result"]["userAnswer"], "Skipped")

        data = self.client.post("/api/quiz/next").get_json()
        self.assertTrue(data["finished"])
        self.assertIn("Assessment Complete", data["quiz"])

        summary = self.client.get("/api/quiz/summary").get_json()
        self.assertEqual(summary["correctCount"], 0)
        self.assertEqual(summary["incorrectCount"], 1)
        self.assertEqual(summary["skippedCount"], 1)
        self.assertEqual(summary["rawScore"], 0.0)

    def test_finished_quiz_rejects_more_answers(self):
        with mock.patch.object(main, "provider", StubProvider(GENERATED)):
            self.client.post("/api/quiz/load")
        for _ in GENERATED:
            self.client.post("/api/quiz/answer", json={"option_index": 0})
            self.client.post("/api/quiz/next")
        before = self.client.get("/api/quiz/summary").get_json()
        self.assertEqual(before["rawScore"], 2.0)

        resp = self.client.post("/api/quiz/answer", json={"option_index": 0})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.get_json()["error"], "Quiz already finished")
        self.assertEqual(self.client.post("/api/quiz/skip").status_code, 400)
        self.assertEqual(self.client.post("/api/quiz/next").status_code, 400)

        self.assertEqual(self.client.get("/api/quiz/summary").get_json(), before)


class TestSessionStore(AppTestCase):

    def test_states_are_capped(self):
        main.app.config["MAX_SESSIONS"] = 2
        first = main.app.test_client()
        first.post("/api/slides/next")
        for _ in range(3):
            main.app.test_client().get("/api/visualizer/state")
        self.assertEqual(len(main._STATES), 2)

        # the oldest browser lost its state and starts over
        self.assertEqual(first.post("/api/slides/next").get_json()["index"], 1)
        self.assertEqual(len(main._STATES), 2)

    def test_recent_use_keeps_a_state(self):
        main.app.config["MAX_SESSIONS"] = 2
        kept = main.app.test_client()
        kept.post("/api/slides/next")
        main.app.test_client().get("/api/visualizer/state")
        kept.get("/api/visualizer/state")
        main.app.test_client().get("/api/visualizer/state")

        self.assertEqual(len(main._STATES), 2)
        self.assertEqual(kept.post("/api/slides/next").get_json()["index"], 2)

    def test_grade(self):
        with mock.patch.object(main, "provider", StubProvider(grade=Grade(70.0, "Close."))):
            resp = self.client.post("/api/quiz/grade", json={"question": "Q?", "answer": "A"})
        self.assertEqual(resp.get_json(), {"score": 70.0, "feedback": "Close."})

    def test_grade_without_key(self):
        with mock.patch.object(main, "provider", StubProvider()):
            data = self.client.post("/api/quiz/grade", json={"question": "Q?", "answer": "A"}).get_json()
        self.assertEqual(data["score"], 0.0)
        self.assertEqual(data["feedback"], "API Key missing. Cannot evaluate.")

    def test_grade_validation(self):
        self.assertEqual(self.client.post("/api/quiz/grade", json={"answer": "A"}).status_code, 400)


if __name__ == "__main__":
    unittest.main()
