import math
from typing import List, Sequence, Tuple

from packages.ais_qbank.domain import Difficulty
from .schema import FactorScore
from .weights import (
    KEYWORD_WEIGHT,
    COMPLETENESS_WEIGHT,
    EXPLANATION_WEIGHT,
    DEPTH_WEIGHT,
    REASONING_WEIGHT,
    KEYWORD_TARGET_COVERAGE,
    CODE_PATTERN,
    SENTENCE_SPLIT_PATTERN,
    EXAMPLE_PHRASES,
    TECHNICAL_TERMS,
    REASONING_PHRASES,
)

def round_half_up(value: float) -> int:
    """
    Round .5 upwards (2.5 -> 3). Python's round() would give 2.
    """
    return int(math.floor(value + 0.5))

def match_keywords(answer: str, expected_keywords: Sequence[str]) -> Tuple[List[str], float]:
    """
    Returns the expected keywords present in the answer and the coverage ratio.
    """
    lowered = answer.lower()
    matched = [kw for kw in expected_keywords if kw.lower() in lowered]
    coverage = len(matched) / max(1, len(expected_keywords))
    return matched, coverage

def has_code(answer: str) -> bool:
    return CODE_PATTERN.search(answer) is not None

def count_words(answer: str) -> int:
    return len(answer.strip().split())

def count_sentences(answer: str) -> int:
    return len([part for part in SENTENCE_SPLIT_PATTERN.split(answer) if part.strip()])

def find_technical_terms(answer: str) -> List[str]:
    lowered = answer.lower()
    return [term for term in TECHNICAL_TERMS if term in lowered]

def calculate_keyword_score(
    matched: Sequence[str],
    total: int,
    coverage: float,
    difficulty: Difficulty
) -> FactorScore:
    """
    Keyword coverage. Reaching the difficulty's target coverage earns full credit.
    """
    target = KEYWORD_TARGET_COVERAGE[Difficulty(difficulty)]
    points = min(KEYWORD_WEIGHT, round_half_up((coverage / target) * KEYWORD_WEIGHT))

    strengths: List[str] = []
    improvements: List[str] = []
    if coverage >= 0.7:
        strengths.append(f"Excellent technical accuracy ({len(matched)}/{total} key concepts)")
    elif coverage >= 0.5:
        strengths.append("Good grasp of core concepts")
    elif coverage >= 0.3:
        improvements.append(f"Cover more key concepts ({len(matched)}/{total})")
    else:
        improvements.append(f"Missing critical concepts ({len(matched)}/{total})")

    return FactorScore(
        name="keyword_coverage",
        points=points,
        max_points=KEYWORD_WEIGHT,
        strengths=strengths,
        improvements=improvements,
    )

def calculate_completeness_score(word_count: int, is_coding: bool, code_detected: bool) -> FactorScore:
    """
    Coding questions are judged on the presence of code; others on length.
    """
    strengths: List[str] = []
    improvements: List[str] = []

    if is_coding and code_detected:
        points = 12
        strengths.append("Provided code implementation")
    elif is_coding:
        points = 4
        improvements.append("Include actual code implementation")
    elif word_count >= 50:
        points = 12
    elif word_count >= 30:
        points = 8
    else:
        points = 5
        improvements.append("Provide more complete explanation")

    return FactorScore(
        name="completeness",
        points=points,
        max_points=COMPLETENESS_WEIGHT,
        strengths=strengths,
        improvements=improvements,
    )

def calculate_explanation_score(answer: str) -> FactorScore:
    """
    Multi-sentence answers and concrete examples each add 6 points to a base of 6.
    """
    lowered = answer.lower()
    points = 6
    strengths: List[str] = []

    if count_sentences(answer) >= 2:
        points += 6

    if any(phrase in lowered for phrase in EXAMPLE_PHRASES):
        points += 6
        strengths.append("Included helpful examples")

    return FactorScore(
        name="explanation",
        points=min(EXPLANATION_WEIGHT, points),
        max_points=EXPLANATION_WEIGHT,
        strengths=strengths,
    )

def calculate_depth_score(technical_terms: Sequence[str]) -> FactorScore:
    count = len(technical_terms)
    strengths: List[str] = []
    improvements: List[str] = []

    if count >= 5:
        points = 22
        strengths.append(f"Excellent technical depth ({count} technical terms)")
    elif count >= 3:
        points = 18
        strengths.append("Good technical detail")
    elif count >= 1:
        points = 13
    else:
        points = 8
        improvements.append("Add more specific technical details")

    return FactorScore(
        name="technical_depth",
        points=points,
        max_points=DEPTH_WEIGHT,
        strengths=strengths,
        improvements=improvements,
    )

def calculate_reasoning_score(answer: str) -> FactorScore:
    lowered = answer.lower()
    points = 8
    strengths: List[str] = []
    improvements: List[str] = []

    if any(phrase in lowered for phrase in REASONING_PHRASES):
        points += 7
        strengths.append("Explained reasoning clearly")
    else:
        improvements.append("Explain WHY your solution works")

    return FactorScore(
        name="reasoning",
        points=points,
        max_points=REASONING_WEIGHT,
        strengths=strengths,
        improvements=improvements,
    )
