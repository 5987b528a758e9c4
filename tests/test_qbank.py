import sys
import os
import json
import shutil
import tempfile
import unittest

# Ensure project root is in path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(project_root)

from packages.ais_core.errors import QuestionBankError
from packages.ais_qbank.domain import InterviewRole, QuestionCategory, Difficulty
from packages.ais_qbank.repository import StaticQuestionBank, JsonFileQuestionBank, dump_question_bank

class TestStaticQuestionBank(unittest.TestCase):
    def setUp(self):
        self.bank = StaticQuestionBank()

    def test_every_role_has_questions(self):
        self.assertEqual(set(self.bank.roles()), set(InterviewRole))
        for role in InterviewRole:
            questions = self.bank.get_questions(role)
            self.assertGreaterEqual(len(questions), 1)
            self.assertEqual(len({q.id for q in questions}), len(questions))

    def test_order_is_stable(self):
        ids = [q.id for q in self.bank.get_questions(InterviewRole.FRONTEND)]
        self.assertEqual(ids, ["fe-1", "fe-2", "fe-3", "fe-4"])

    def test_returned_list_is_a_copy(self):
        questions = self.bank.get_questions(InterviewRole.BACKEND)
        questions.clear()
        self.assertEqual(len(self.bank.get_questions(InterviewRole.BACKEND)), 4)

    def test_coding_flag(self):
        fe3 = self.bank.get_questions(InterviewRole.FRONTEND)[2]
        self.assertEqual(fe3.category, QuestionCategory.CODING)
        self.assertTrue(fe3.is_coding)
        self.assertEqual(fe3.difficulty, Difficulty.EASY)

    def test_unknown_role_in_custom_bank(self):
        bank = StaticQuestionBank({InterviewRole.ML: []})
        self.assertEqual(bank.get_questions(InterviewRole.FRONTEND), [])
        self.assertEqual(bank.roles(), [])

class TestJsonFileQuestionBank(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.temp_dir, "questions.json")

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_dump_and_load(self):
        dump_question_bank(StaticQuestionBank(), self.path)
        loaded = JsonFileQuestionBank(self.path)
        original = StaticQuestionBank()
        for role in InterviewRole:
            self.assertEqual(loaded.get_questions(role), original.get_questions(role))

    def test_missing_file(self):
        with self.assertRaises(QuestionBankError):
            JsonFileQuestionBank(os.path.join(self.temp_dir, "missing.json"))

    def test_malformed_file(self):
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({"frontend": [{"id": "x", "category": "poetry"}]}, f)
        with self.assertRaises(QuestionBankError) as ctx:
            JsonFileQuestionBank(self.path)
        self.assertEqual(ctx.exception.code, "QBANK_Error")

if __name__ == '__main__':
    unittest.main()
