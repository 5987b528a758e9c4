from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class FactorScore(BaseModel):
    """
    Points earned by a single scoring factor plus the notes it emitted.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Factor identifier (e.g. keyword_coverage)")
    points: int = Field(..., ge=0, description="Points awarded")
    max_points: int = Field(..., description="Factor weight")
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)

class ScoreBreakdown(BaseModel):
    """
    Evidence behind a score.
    """
    model_config = ConfigDict(frozen=True)

    factors: List[FactorScore]
    keyword_coverage: float = Field(..., description="Fraction of expected keywords found")
    matched_keywords: List[str] = Field(default_factory=list)
    word_count: int
    code_detected: bool
    technical_terms: List[str] = Field(default_factory=list)
    raw_total: int = Field(..., description="Sum of factor points before adjustment")
    difficulty_adjustment: int = Field(0, description="Points added (or removed) for difficulty")
    coding_bonus: int = 0

class ScoreResult(BaseModel):
    """
    Final result of scoring one answer.
    """
    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100, description="Final score 0-100")
    feedback: str
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    breakdown: Optional[ScoreBreakdown] = None
