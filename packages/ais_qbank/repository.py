import json
import os
from typing import Dict, List, Mapping, Optional, Sequence

from packages.ais_core.errors import QuestionBankError
from packages.ais_core.logging import get_logger
from .domain import Question, InterviewRole
from .default_bank import DEFAULT_QUESTIONS
from .repository_interface import QuestionBank

logger = get_logger("ais_qbank.repository")

class StaticQuestionBank(QuestionBank):
    """
    In-memory question bank. Defaults to the built-in questions.
    """

    def __init__(self, questions: Optional[Mapping[InterviewRole, Sequence[Question]]] = None):
        source = DEFAULT_QUESTIONS if questions is None else questions
        # Stored as tuples; get_questions hands out fresh lists
        self._questions: Dict[InterviewRole, tuple] = {
            InterviewRole(role): tuple(items) for role, items in source.items()
        }

    def get_questions(self, role: InterviewRole) -> List[Question]:
        return list(self._questions.get(role, ()))

    def roles(self) -> List[InterviewRole]:
        return [role for role, items in self._questions.items() if items]

class JsonFileQuestionBank(StaticQuestionBank):
    """
    Question bank loaded once from a JSON file shaped as
    {"frontend": [{"id": ..., "category": ..., ...}], ...}.
    """

    def __init__(self, file_path: str):
        self.file_path = file_path
        super().__init__(self._load(file_path))

    @staticmethod
    def _load(file_path: str) -> Dict[InterviewRole, List[Question]]:
        if not os.path.exists(file_path):
            raise QuestionBankError(f"Question bank file not found: {file_path}")
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            loaded = {
                InterviewRole(role): [Question.from_dict(item) for item in items]
                for role, items in data.items()
            }
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(f"Failed to load questions from {file_path}: {e}")
            raise QuestionBankError(
                f"Malformed question bank file: {file_path}",
                details={"error": str(e)}
            ) from e

        logger.info(f"Loaded {sum(len(v) for v in loaded.values())} questions from {file_path}.")
        return loaded

def dump_question_bank(bank: QuestionBank, file_path: str) -> None:
    """Write a bank to JSON in the format JsonFileQuestionBank reads."""
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    data = {
        role.value: [q.to_dict() for q in bank.get_questions(role)]
        for role in bank.roles()
    }
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
