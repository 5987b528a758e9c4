from .engine import AnswerScorer, build_feedback, apply_difficulty_adjustment
from .schema import ScoreResult, ScoreBreakdown, FactorScore

__all__ = [
    "AnswerScorer",
    "build_feedback",
    "apply_difficulty_adjustment",
    "ScoreResult",
    "ScoreBreakdown",
    "FactorScore",
]
