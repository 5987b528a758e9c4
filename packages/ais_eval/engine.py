from typing import List

from packages.ais_core.logging import get_logger
from packages.ais_qbank.domain import Question, Difficulty
from .schema import ScoreResult, ScoreBreakdown
from .rules import (
    round_half_up,
    match_keywords,
    has_code,
    count_words,
    find_technical_terms,
    calculate_keyword_score,
    calculate_completeness_score,
    calculate_explanation_score,
    calculate_depth_score,
    calculate_reasoning_score,
)
from .weights import (
    EASY_PENALTY_BELOW,
    EASY_PENALTY,
    MEDIUM_BONUS_FROM,
    MEDIUM_BONUS,
    HARD_BONUS_FROM,
    HARD_BONUS,
    CODING_BONUS,
    CODING_BONUS_MIN_COVERAGE,
    MAX_SCORE,
    MIN_SCORE,
)

logger = get_logger("ais.eval")

def apply_difficulty_adjustment(raw_score: int, difficulty: Difficulty) -> int:
    """
    Easy answers below 70 lose 2 points; solid medium and hard answers get a bonus.
    """
    if difficulty == Difficulty.EASY and raw_score < EASY_PENALTY_BELOW:
        return max(MIN_SCORE, raw_score - EASY_PENALTY)
    if difficulty == Difficulty.MEDIUM and raw_score >= MEDIUM_BONUS_FROM:
        return min(MAX_SCORE, raw_score + MEDIUM_BONUS)
    if difficulty == Difficulty.HARD and raw_score >= HARD_BONUS_FROM:
        return min(MAX_SCORE, raw_score + HARD_BONUS)
    return raw_score

def build_feedback(score: int, improvements: List[str]) -> str:
    """
    Feedback sentence for a final score bracket.
    """
    if score >= 95:
        return (
            f"Exceptional answer ({score}/100)! You demonstrated mastery with comprehensive "
            "technical details, clear examples, and strong analytical thinking."
        )
    if score >= 85:
        focus = improvements[0].lower() if improvements else "structure"
        return (
            f"Excellent response ({score}/100)! You covered the key concepts well with good "
            f"technical depth. Minor improvements possible in {focus}."
        )
    if score >= 75:
        return (
            f"Good answer ({score}/100). You hit the main points but there's room to strengthen "
            f"your response. Focus on: {'; '.join(improvements[:2])}."
        )
    if score >= 65:
        return (
            f"Adequate attempt ({score}/100). You touched on some concepts but need more depth. "
            f"Key areas to improve: {'; '.join(improvements[:2])}."
        )
    if score >= 50:
        return (
            f"Below expectations ({score}/100). Your answer lacks sufficient detail and technical "
            f"accuracy. Critical improvements needed: {'; '.join(improvements[:3])}."
        )
    return (
        f"Needs significant improvement ({score}/100). The answer is incomplete and missing key "
        f"concepts. Please review the question and provide: {'; '.join(improvements[:3])}."
    )

class AnswerScorer:
    """
    Deterministic heuristic grader.

    Five weighted factors (keywords 33, completeness 12, explanation 18,
    technical depth 22, reasoning 15) are summed, adjusted for difficulty,
    given a coding bonus where it applies, and clamped to 0-100.
    The scorer is pure: no I/O, no randomness, same input gives the same result.
    """

    def score(self, question: Question, answer_text: str) -> ScoreResult:
        matched, coverage = match_keywords(answer_text, question.expected_keywords)
        code_detected = has_code(answer_text)
        word_count = count_words(answer_text)
        technical_terms = find_technical_terms(answer_text)

        factors = [
            calculate_keyword_score(matched, len(question.expected_keywords), coverage, question.difficulty),
            calculate_completeness_score(word_count, question.is_coding, code_detected),
            calculate_explanation_score(answer_text),
            calculate_depth_score(technical_terms),
            calculate_reasoning_score(answer_text),
        ]

        strengths: List[str] = []
        improvements: List[str] = []
        for factor in factors:
            strengths.extend(factor.strengths)
            improvements.extend(factor.improvements)

        raw_total = sum(factor.points for factor in factors)
        adjusted = apply_difficulty_adjustment(raw_total, question.difficulty)

        coding_bonus = 0
        if question.is_coding and code_detected and coverage >= CODING_BONUS_MIN_COVERAGE:
            boosted = min(MAX_SCORE, adjusted + CODING_BONUS)
            coding_bonus = boosted - adjusted
            adjusted = boosted
            strengths.append("Provided working code solution")

        final_score = round_half_up(max(MIN_SCORE, min(MAX_SCORE, adjusted)))

        logger.debug(
            f"Scored answer for {question.id}: raw={raw_total} final={final_score} "
            f"coverage={coverage:.2f} code={code_detected}"
        )

        return ScoreResult(
            score=final_score,
            feedback=build_feedback(final_score, improvements),
            strengths=strengths,
            improvements=improvements,
            breakdown=ScoreBreakdown(
                factors=factors,
                keyword_coverage=coverage,
                matched_keywords=matched,
                word_count=word_count,
                code_detected=code_detected,
                technical_terms=technical_terms,
                raw_total=raw_total,
                difficulty_adjustment=adjusted - coding_bonus - raw_total,
                coding_bonus=coding_bonus,
            ),
        )
