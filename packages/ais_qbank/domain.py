from enum import Enum
from dataclasses import dataclass, field
from typing import Tuple, Optional, Dict, Any

class QuestionCategory(str, Enum):
    BEHAVIORAL = "behavioral"
    TECHNICAL = "technical"
    CODING = "coding"
    SYSTEM_DESIGN = "system-design"

class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

class InterviewRole(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"
    DATA = "data"
    ML = "ml"

class InterviewLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"

ROLE_LABELS: Dict[InterviewRole, str] = {
    InterviewRole.FRONTEND: "Frontend Engineer",
    InterviewRole.BACKEND: "Backend Engineer",
    InterviewRole.FULLSTACK: "Full Stack Engineer",
    InterviewRole.DATA: "Data Engineer",
    InterviewRole.ML: "ML Engineer",
}

LEVEL_DESCRIPTIONS: Dict[InterviewLevel, Tuple[str, str]] = {
    InterviewLevel.ENTRY: ("Entry Level", "0-2 years experience"),
    InterviewLevel.MID: ("Mid Level", "2-5 years experience"),
    InterviewLevel.SENIOR: ("Senior Level", "5+ years experience"),
}

# Minutes. Advisory only, never enforced as a cutoff.
DURATION_CHOICES: Tuple[int, ...] = (15, 30, 45, 60)

@dataclass(frozen=True)
class Question:
    """
    A single interview question. Supplied per role and never mutated.
    """
    id: str
    category: QuestionCategory
    prompt: str
    difficulty: Difficulty
    hints: Tuple[str, ...] = field(default_factory=tuple)
    expected_keywords: Tuple[str, ...] = field(default_factory=tuple)
    follow_up: Optional[str] = None

    @property
    def is_coding(self) -> bool:
        return self.category == QuestionCategory.CODING

    @classmethod
    def from_dict(cls, item: Dict[str, Any]) -> "Question":
        return cls(
            id=item["id"],
            category=QuestionCategory(item["category"]),
            prompt=item["prompt"],
            difficulty=Difficulty(item["difficulty"]),
            hints=tuple(item.get("hints") or ()),
            expected_keywords=tuple(item.get("expected_keywords") or ()),
            follow_up=item.get("follow_up"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "category": self.category.value,
            "prompt": self.prompt,
            "difficulty": self.difficulty.value,
            "hints": list(self.hints),
            "expected_keywords": list(self.expected_keywords),
            "follow_up": self.follow_up,
        }
