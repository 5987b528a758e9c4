from .domain import (
    Question,
    QuestionCategory,
    Difficulty,
    InterviewRole,
    InterviewLevel,
    ROLE_LABELS,
    LEVEL_DESCRIPTIONS,
    DURATION_CHOICES,
)
from .repository_interface import QuestionBank
from .repository import StaticQuestionBank, JsonFileQuestionBank, dump_question_bank

__all__ = [
    "Question",
    "QuestionCategory",
    "Difficulty",
    "InterviewRole",
    "InterviewLevel",
    "ROLE_LABELS",
    "LEVEL_DESCRIPTIONS",
    "DURATION_CHOICES",
    "QuestionBank",
    "StaticQuestionBank",
    "JsonFileQuestionBank",
    "dump_question_bank",
]
