import re
from typing import Dict, Tuple

from packages.ais_qbank.domain import Difficulty

# Factor weights. They sum to 100.
KEYWORD_WEIGHT = 33
COMPLETENESS_WEIGHT = 12
EXPLANATION_WEIGHT = 18
DEPTH_WEIGHT = 22
REASONING_WEIGHT = 15

# Coverage that earns full keyword credit, per difficulty
KEYWORD_TARGET_COVERAGE: Dict[Difficulty, float] = {
    Difficulty.HARD: 0.5,
    Difficulty.MEDIUM: 0.6,
    Difficulty.EASY: 0.7,
}

# Case-sensitive on purpose: matches the raw answer text
CODE_PATTERN = re.compile(r"```|function|const|let|var|class|def|public|private|\{|\}|=>")
SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")

EXAMPLE_PHRASES: Tuple[str, ...] = (
    "example",
    "for instance",
    "such as",
    "like when",
    "e.g.",
)

TECHNICAL_TERMS: Tuple[str, ...] = (
    "implement", "architecture", "design", "optimize", "performance", "scale",
    "algorithm", "complexity", "pattern", "best practice", "framework", "library",
    "api", "database", "cache", "async", "sync", "thread", "memory", "latency",
    "component", "function", "method", "class", "interface", "module", "service",
    "system", "return", "parameter", "variable", "loop", "condition", "array",
    "object", "string", "number",
)

REASONING_PHRASES: Tuple[str, ...] = (
    "because", "therefore", "thus", "so", "since", "due to", "as a result",
    "this allows", "this ensures", "this helps", "this way", "in order to",
)

# Difficulty adjustment applied to the raw factor sum
EASY_PENALTY_BELOW = 70
EASY_PENALTY = 2
MEDIUM_BONUS_FROM = 60
MEDIUM_BONUS = 5
HARD_BONUS_FROM = 55
HARD_BONUS = 10
CODING_BONUS = 5
CODING_BONUS_MIN_COVERAGE = 0.5

MAX_SCORE = 100
MIN_SCORE = 0
