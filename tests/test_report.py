import sys
import os
import unittest
from datetime import datetime

# Ensure project root is in path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(project_root)

from packages.ais_qbank.domain import InterviewRole, InterviewLevel
from packages.ais_qbank.repository import StaticQuestionBank
from packages.ais_report.dto import ScoreTier
from packages.ais_report.engine import ReportGenerator, format_elapsed, score_tier
from packages.ais_session.dto import SessionContext, AnswerRecord, InterviewSelection
from packages.ais_session.state import InterviewStage

def record(question_id, score):
    return AnswerRecord(
        question_id=question_id,
        answer="answer",
        timestamp=datetime(2024, 1, 1, 9, 0),
        score=score,
        feedback=f"feedback {score}",
        strengths=["s"],
        improvements=["i"],
    )

class TestReportGenerator(unittest.TestCase):
    def setUp(self):
        self.questions = StaticQuestionBank().get_questions(InterviewRole.BACKEND)

    def test_summary(self):
        context = SessionContext(
            session_id="sess_1",
            stage=InterviewStage.COMPLETE,
            selection=InterviewSelection(role=InterviewRole.BACKEND, level=InterviewLevel.SENIOR, duration_minutes=45),
            elapsed_seconds=754,
            answers=[record("be-1", 90), record("be-2", 71), record("be-3", 40)],
        )
        report = ReportGenerator.generate(context, self.questions)

        self.assertEqual(report.session_id, "sess_1")
        self.assertEqual(report.header.overall_score, 67)
        self.assertEqual(report.header.questions_answered, 3)
        self.assertEqual(report.header.total_questions, 4)
        self.assertEqual(report.header.time_spent, "12:34")
        self.assertEqual(report.header.excellent_answers, 1)
        self.assertEqual(report.header.role_label, "Backend Engineer")
        self.assertEqual(report.header.level_label, "Senior Level")
        self.assertEqual(
            [d.tier for d in report.details],
            [ScoreTier.EXCELLENT, ScoreTier.GOOD, ScoreTier.NEEDS_WORK],
        )
        self.assertEqual(report.details[0].prompt, self.questions[0].prompt)

    def test_empty_session(self):
        report = ReportGenerator.generate(SessionContext(session_id="sess_2"), [])
        self.assertEqual(report.header.overall_score, 0)
        self.assertEqual(report.header.time_spent, "00:00")
        self.assertEqual(report.details, [])

    def test_helpers(self):
        self.assertEqual(format_elapsed(59), "00:59")
        self.assertEqual(format_elapsed(3600), "60:00")
        self.assertEqual(score_tier(85), ScoreTier.EXCELLENT)
        self.assertEqual(score_tier(70), ScoreTier.GOOD)
        self.assertEqual(score_tier(69), ScoreTier.NEEDS_WORK)

if __name__ == '__main__':
    unittest.main()
