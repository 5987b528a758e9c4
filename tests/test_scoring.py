import sys
import os
import unittest

# Ensure project root is in path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(project_root)

from packages.ais_eval.engine import AnswerScorer, apply_difficulty_adjustment, build_feedback
from packages.ais_eval.rules import round_half_up, match_keywords, has_code, count_sentences, find_technical_terms
from packages.ais_qbank.domain import Question, QuestionCategory, Difficulty, InterviewRole
from packages.ais_qbank.default_bank import DEFAULT_QUESTIONS

DEBOUNCE_ANSWER = (
    "I would use setTimeout to delay the function call and clearTimeout to cancel "
    "the previous one, which improves performance by reducing API calls."
)

def make_question(category=QuestionCategory.TECHNICAL, difficulty=Difficulty.EASY, keywords=None):
    return Question(
        id="q-test",
        category=category,
        prompt="Test prompt",
        difficulty=difficulty,
        expected_keywords=tuple(keywords or ("debounce", "setTimeout", "performance", "API calls")),
    )

class TestScoringVector(unittest.TestCase):
    def setUp(self):
        self.scorer = AnswerScorer()
        self.coding_question = next(q for q in DEFAULT_QUESTIONS[InterviewRole.FRONTEND] if q.id == "fe-3")

    def test_debounce_answer_on_coding_question(self):
        """fe-3: 33 + 12 + 6 + 18 + 8 = 77, no easy penalty, +5 coding bonus."""
        result = self.scorer.score(self.coding_question, DEBOUNCE_ANSWER)
        self.assertEqual(result.score, 82)

        breakdown = result.breakdown
        self.assertEqual(breakdown.matched_keywords, ["setTimeout", "performance", "API calls"])
        self.assertAlmostEqual(breakdown.keyword_coverage, 0.75)
        self.assertEqual(breakdown.word_count, 23)
        self.assertTrue(breakdown.code_detected)
        self.assertEqual(breakdown.raw_total, 77)
        self.assertEqual(breakdown.difficulty_adjustment, 0)
        self.assertEqual(breakdown.coding_bonus, 5)
        self.assertEqual([f.points for f in breakdown.factors], [33, 12, 6, 18, 8])

        self.assertEqual(result.strengths, [
            "Excellent technical accuracy (3/4 key concepts)",
            "Provided code implementation",
            "Good technical detail",
            "Provided working code solution",
        ])
        self.assertEqual(result.improvements, ["Explain WHY your solution works"])
        self.assertEqual(
            result.feedback,
            "Good answer (82/100). You hit the main points but there's room to strengthen "
            "your response. Focus on: Explain WHY your solution works."
        )

    def test_debounce_answer_on_technical_question(self):
        result = self.scorer.score(make_question(), DEBOUNCE_ANSWER)
        self.assertEqual(result.score, 70)
        self.assertEqual(result.improvements, ["Provide more complete explanation", "Explain WHY your solution works"])
        self.assertTrue(result.feedback.startswith("Adequate attempt (70/100)."))
        self.assertIn("Provide more complete explanation; Explain WHY your solution works.", result.feedback)

    def test_deterministic(self):
        first = self.scorer.score(self.coding_question, DEBOUNCE_ANSWER)
        second = self.scorer.score(self.coding_question, DEBOUNCE_ANSWER)
        self.assertEqual(first, second)

class TestScoringProperties(unittest.TestCase):
    def setUp(self):
        self.scorer = AnswerScorer()

    def test_keyword_points_monotonic(self):
        question = make_question(keywords=("alpha", "beta", "gamma", "delta", "epsilon"))
        answers = [
            "nothing here",
            "alpha",
            "alpha beta",
            "alpha beta gamma",
            "alpha beta gamma delta",
            "alpha beta gamma delta epsilon",
        ]
        points = [self.scorer.score(question, a).breakdown.factors[0].points for a in answers]
        self.assertEqual(points, sorted(points))
        self.assertEqual(points[0], 0)
        self.assertEqual(points[-1], 33)

    def test_bounds(self):
        rich = (
            "For example, I implement the architecture with a cache because latency matters. "
            "The design uses an async service, a database, an api, and a component pattern. "
            "```const x = () => {}``` so this ensures performance at scale."
        )
        samples = ["x", "?", rich, rich * 5]
        for difficulty in Difficulty:
            for category in QuestionCategory:
                question = make_question(category=category, difficulty=difficulty)
                for answer in samples:
                    score = self.scorer.score(question, answer).score
                    self.assertGreaterEqual(score, 0)
                    self.assertLessEqual(score, 100)

    def test_hard_question_bonus_is_capped(self):
        question = make_question(difficulty=Difficulty.HARD, keywords=("cache", "latency"))
        answer = (
            "For example, I implement a cache because latency matters. "
            "The design uses an async service, a database, an api, and a component."
        )
        self.assertEqual(self.scorer.score(question, answer).score, 100)

    def test_missing_concepts_noted(self):
        result = self.scorer.score(make_question(), "I am not sure")
        self.assertIn("Missing critical concepts (0/4)", result.improvements)
        self.assertIn("Add more specific technical details", result.improvements)

class TestScoringRules(unittest.TestCase):
    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(35.357), 35)
        self.assertEqual(round_half_up(84.5), 85)

    def test_keyword_match_is_case_insensitive_substring(self):
        matched, coverage = match_keywords("We used SSR via next.js", ("SSR", "Next.js", "SEO"))
        self.assertEqual(matched, ["SSR", "Next.js"])
        self.assertAlmostEqual(coverage, 2 / 3)

    def test_no_keywords_gives_zero_coverage(self):
        self.assertEqual(match_keywords("anything", ()), ([], 0.0))

    def test_code_detection_is_case_sensitive(self):
        self.assertTrue(has_code("const x = 1"))
        self.assertTrue(has_code("items.map(i => i)"))
        self.assertFalse(has_code("CONST VALUES ONLY"))

    def test_sentence_count_ignores_blank_parts(self):
        self.assertEqual(count_sentences("One. Two!! Three?"), 3)
        self.assertEqual(count_sentences("Only one..."), 1)

    def test_technical_terms_counted_once(self):
        self.assertEqual(find_technical_terms("api api API"), ["api"])

    def test_difficulty_adjustment(self):
        self.assertEqual(apply_difficulty_adjustment(69, Difficulty.EASY), 67)
        self.assertEqual(apply_difficulty_adjustment(1, Difficulty.EASY), 0)
        self.assertEqual(apply_difficulty_adjustment(70, Difficulty.EASY), 70)
        self.assertEqual(apply_difficulty_adjustment(60, Difficulty.MEDIUM), 65)
        self.assertEqual(apply_difficulty_adjustment(59, Difficulty.MEDIUM), 59)
        self.assertEqual(apply_difficulty_adjustment(55, Difficulty.HARD), 65)
        self.assertEqual(apply_difficulty_adjustment(98, Difficulty.HARD), 100)

    def test_feedback_brackets(self):
        self.assertTrue(build_feedback(95, []).startswith("Exceptional answer (95/100)!"))
        self.assertTrue(build_feedback(85, []).endswith("Minor improvements possible in structure."))
        self.assertTrue(
            build_feedback(90, ["Explain WHY your solution works"]).endswith(
                "Minor improvements possible in explain why your solution works."
            )
        )
        self.assertTrue(build_feedback(50, ["a", "b", "c", "d"]).endswith("Critical improvements needed: a; b; c."))
        self.assertTrue(build_feedback(10, ["a"]).startswith("Needs significant improvement (10/100)."))

if __name__ == '__main__':
    unittest.main()
