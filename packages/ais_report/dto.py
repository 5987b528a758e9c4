from enum import Enum
from typing import List
from pydantic import BaseModel, Field

from packages.ais_qbank.domain import QuestionCategory

class ScoreTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_WORK = "needs-work"

class ReportHeader(BaseModel):
    """
    Summary section of the results screen.
    """
    overall_score: int = Field(..., ge=0, le=100, description="Rounded mean of answer scores")
    questions_answered: int = Field(..., description="Number of recorded answers")
    total_questions: int = Field(..., description="Questions in the role's set")
    time_spent: str = Field(..., description="Elapsed interview time as MM:SS")
    excellent_answers: int = Field(..., description="Answers scoring 85 or more")
    role_label: str = Field(..., description="Display name of the interviewed role")
    level_label: str = Field(..., description="Display name of the interview level")

class ReportDetail(BaseModel):
    """
    One reviewed answer.
    """
    question_id: str
    prompt: str
    category: QuestionCategory
    answer: str
    score: int
    tier: ScoreTier
    feedback: str
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)

class InterviewReport(BaseModel):
    version: str = Field("1.0", description="Schema version")
    session_id: str
    header: ReportHeader
    details: List[ReportDetail]
