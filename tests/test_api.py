import sys
import os
import unittest

from fastapi.testclient import TestClient

# Ensure project root is in path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(project_root)

from AIS.main import app
from AIS.api.dependencies import get_interview_service, get_timings
from packages.ais_providers.stt.mock import MockSTTProvider
from packages.ais_providers.tts.mock import MockNarrationProvider
from packages.ais_qbank.repository import StaticQuestionBank
from packages.ais_service.interview_service import InterviewService
from packages.ais_session.dto import ControllerTimings
from packages.ais_session.infrastructure.memory_repo import MemorySessionRegistry
from packages.ais_session.policy import FreeTierPolicy
from packages.ais_usage.clock import FixedClock
from packages.ais_usage.infrastructure.memory_repo import MemoryUsageCounterStore

ANSWER = (
    "I would use setTimeout to delay the function call and clearTimeout to cancel "
    "the previous one, which improves performance by reducing API calls."
)

class TestInterviewAPI(unittest.TestCase):
    def setUp(self):
        self.store = MemoryUsageCounterStore()
        self.service = self.make_service(transcriber=MockSTTProvider(text="spoken words"))
        app.dependency_overrides[get_interview_service] = lambda: self.service
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def make_service(self, transcriber=None, narrator=None):
        return InterviewService(
            registry=MemorySessionRegistry(),
            question_bank=StaticQuestionBank(),
            usage_store=self.store,
            clock=FixedClock(),
            policy=FreeTierPolicy(3),
            timings=ControllerTimings.immediate(),
            narrator=narrator or MockNarrationProvider(),
            transcriber=transcriber,
        )

    def create(self, **overrides):
        payload = {"role": "frontend", "level": "mid", "duration_minutes": 30}
        payload.update(overrides)
        response = self.client.post("/api/v1/interviews", json=payload)
        self.assertEqual(response.status_code, 201)
        return response.json()["session_id"]

    def start(self):
        session_id = self.create()
        response = self.client.post(f"/api/v1/interviews/{session_id}/start")
        self.assertEqual(response.status_code, 200)
        return session_id

    def submit(self, session_id, text=ANSWER):
        self.client.put(f"/api/v1/interviews/{session_id}/answer", json={"text": text})
        return self.client.post(f"/api/v1/interviews/{session_id}/submit")

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")

    def test_catalog(self):
        data = self.client.get("/api/v1/catalog").json()
        self.assertEqual(len(data["roles"]), 5)
        self.assertEqual([level["id"] for level in data["levels"]], ["entry", "mid", "senior"])
        self.assertEqual(data["durations"], [15, 30, 45, 60])
        self.assertIn("alloy", data["voices"])

    def test_create_session(self):
        session_id = self.create()
        data = self.client.get(f"/api/v1/interviews/{session_id}").json()
        self.assertEqual(data["stage"], "setup")
        self.assertEqual(data["role"], "frontend")
        self.assertEqual(data["total_questions"], 4)
        self.assertEqual(data["remaining_free_interviews"], 3)

    def test_invalid_selection(self):
        response = self.client.post("/api/v1/interviews", json={"duration_minutes": 20})
        self.assertEqual(response.status_code, 400)
        response = self.client.post("/api/v1/interviews", json={"role": "designer"})
        self.assertEqual(response.status_code, 422)

    def test_unknown_session(self):
        self.assertEqual(self.client.get("/api/v1/interviews/nope").status_code, 404)
        self.assertEqual(self.client.post("/api/v1/interviews/nope/submit").status_code, 404)
        self.assertEqual(self.client.get("/api/v1/interviews/nope/report").status_code, 404)
        self.assertEqual(self.client.delete("/api/v1/interviews/nope").status_code, 404)

    def test_start_requires_configuration(self):
        response = self.client.post("/api/v1/interviews", json={})
        session_id = response.json()["session_id"]
        response = self.client.post(f"/api/v1/interviews/{session_id}/start")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "CONFIG_INCOMPLETE")

    def test_full_interview(self):
        session_id = self.start()
        self.assertEqual(self.store.get("2024-01-01"), 1)

        response = self.submit(session_id, "   ")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "EMPTY_ANSWER")

        data = self.submit(session_id).json()
        self.assertEqual(data["current_question_index"], 1)
        self.assertEqual(len(data["answers"]), 1)

        data = self.client.post(f"/api/v1/interviews/{session_id}/previous").json()
        self.assertEqual(data["current_question_index"], 0)
        self.assertEqual(len(data["answers"]), 1)
        response = self.client.post(f"/api/v1/interviews/{session_id}/previous")
        self.assertEqual(response.status_code, 400)

        for _ in range(4):
            data = self.submit(session_id).json()
        self.assertEqual(data["stage"], "complete")
        self.assertEqual(data["outcome"]["event"], "INTERVIEW_COMPLETED")

        report = self.client.get(f"/api/v1/interviews/{session_id}/report").json()
        self.assertEqual(report["header"]["questions_answered"], 5)
        self.assertEqual(report["header"]["overall_score"], data["overall_score"])

        data = self.client.post(f"/api/v1/interviews/{session_id}/reset").json()
        self.assertEqual(data["stage"], "setup")
        self.assertEqual(data["answers"], [])

    def test_paywall(self):
        self.store.increment("2024-01-01")
        self.store.increment("2024-01-01")
        self.store.increment("2024-01-01")
        session_id = self.create()
        response = self.client.post(f"/api/v1/interviews/{session_id}/start")
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["stage"], "setup")
        self.assertTrue(data["paywall_visible"])
        self.assertEqual(data["outcome"]["reason"], "QUOTA_EXCEEDED")

        data = self.client.post(f"/api/v1/interviews/{session_id}/paywall/dismiss").json()
        self.assertFalse(data["paywall_visible"])

    def test_submit_while_in_flight(self):
        session_id = self.start()
        self.client.put(f"/api/v1/interviews/{session_id}/answer", json={"text": ANSWER})
        controller = self.service.get_controller(session_id)
        with controller._guard.acquire("other-request"):
            response = self.client.post(f"/api/v1/interviews/{session_id}/submit")
        self.assertEqual(response.status_code, 409)
        self.assertEqual(controller.context.answers, [])

    def test_answer_locked_while_in_flight(self):
        session_id = self.start()
        self.client.put(f"/api/v1/interviews/{session_id}/answer", json={"text": ANSWER})
        controller = self.service.get_controller(session_id)
        with controller._guard.acquire("other-request"):
            response = self.client.put(f"/api/v1/interviews/{session_id}/answer", json={"text": "late edit"})
        self.assertEqual(response.status_code, 409)
        self.assertEqual(controller.context.current_answer, ANSWER)

    def test_narration_audio_download(self):
        self.service = self.make_service(narrator=MockNarrationProvider(audio=b"MP3DATA"))
        session_id = self.create()
        data = self.client.post(f"/api/v1/interviews/{session_id}/start").json()
        self.assertEqual(len(data["narration"]), 2)
        self.assertTrue(data["narration"][0]["has_audio"])
        self.assertEqual(data["narration"][1]["text"], data["current_question"]["prompt"])

        response = self.client.get(f"/api/v1/interviews/{session_id}/narration/0")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, b"MP3DATA")
        self.assertEqual(response.headers["content-type"], "audio/mpeg")
        self.assertEqual(self.client.get(f"/api/v1/interviews/{session_id}/narration/9").status_code, 404)

    def test_api_timings_have_no_pacing(self):
        timings = get_timings()
        self.assertEqual(timings.intro_settle_delay, 0)
        self.assertEqual(timings.first_question_delay, 0)
        self.assertEqual(timings.feedback_settle_delay, 0)
        self.assertEqual(timings.next_question_delay, 0)
        self.assertIsNotNone(timings.narration_timeout)

    def test_transcription_upload(self):
        session_id = self.start()
        self.client.put(f"/api/v1/interviews/{session_id}/answer", json={"text": "Typed"})
        response = self.client.post(
            f"/api/v1/interviews/{session_id}/transcription",
            files={"audio": ("answer.webm", b"webm-bytes", "audio/webm")},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["current_answer"], "Typed spoken words")

    def test_transcription_unavailable(self):
        self.service = self.make_service(transcriber=None)
        session_id = self.start()
        response = self.client.post(
            f"/api/v1/interviews/{session_id}/transcription",
            files={"audio": ("answer.webm", b"webm-bytes", "audio/webm")},
        )
        self.assertEqual(response.status_code, 503)

    def test_hints_and_timer(self):
        session_id = self.start()
        data = self.client.post(f"/api/v1/interviews/{session_id}/hints").json()
        self.assertTrue(data["hints_visible"])
        self.assertEqual(len(data["current_question"]["hints"]), 3)
        data = self.client.post(f"/api/v1/interviews/{session_id}/tick", json={"seconds": 7}).json()
        self.assertEqual(data["elapsed_seconds"], 7)

    def test_usage(self):
        self.start()
        data = self.client.get("/api/v1/usage").json()
        self.assertEqual(data, {"date": "2024-01-01", "used": 1, "limit": 3, "remaining": 2})
        self.assertEqual(self.client.delete("/api/v1/usage").status_code, 204)
        self.assertEqual(self.client.get("/api/v1/usage").json()["used"], 0)

if __name__ == '__main__':
    unittest.main()
