from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from packages.ais_qbank.domain import (
    Question,
    QuestionCategory,
    Difficulty,
    InterviewRole,
    InterviewLevel,
)
from packages.ais_session.dto import AnswerRecord, ActionOutcome, NarrationClip
from packages.ais_session.engine import InterviewController
from packages.ais_session.state import InterviewStage, InterviewerMood, RejectionReason

# --- Request Schemas ---

class SessionCreateRequest(BaseModel):
    role: Optional[InterviewRole] = None
    level: Optional[InterviewLevel] = None
    duration_minutes: Optional[int] = None
    voice_enabled: bool = True

class SelectionRequest(BaseModel):
    role: Optional[InterviewRole] = None
    level: Optional[InterviewLevel] = None
    duration_minutes: Optional[int] = None

class AnswerUpdateRequest(BaseModel):
    text: str = ""

class VoiceRequest(BaseModel):
    enabled: bool

class TickRequest(BaseModel):
    seconds: int = Field(default=1, ge=0, le=3600)

# --- Response Schemas ---

class QuestionSchema(BaseModel):
    id: str
    category: QuestionCategory
    prompt: str
    difficulty: Difficulty
    hints: List[str] = Field(default_factory=list, description="Filled only while hints are visible")
    follow_up: Optional[str] = None

class OutcomeSchema(BaseModel):
    accepted: bool
    reason: Optional[RejectionReason] = None
    event: Optional[str] = None

class SessionResponse(BaseModel):
    session_id: str
    stage: InterviewStage
    role: Optional[InterviewRole] = None
    level: Optional[InterviewLevel] = None
    duration_minutes: Optional[int] = None
    current_question_index: int
    total_questions: int
    progress: float
    current_question: Optional[QuestionSchema] = None
    current_answer: str
    answers: List[AnswerRecord]
    elapsed_seconds: int
    paywall_visible: bool
    hints_visible: bool
    voice_enabled: bool
    is_grading: bool
    is_transcribing: bool
    mood: InterviewerMood
    last_error: Optional[str] = None
    narration: List[NarrationClip] = Field(default_factory=list, description="Audio at GET /interviews/{id}/narration/{index}")
    overall_score: int
    remaining_free_interviews: Optional[int] = None
    outcome: Optional[OutcomeSchema] = None

class UsageResponse(BaseModel):
    date: str
    used: int
    limit: Optional[int] = None
    remaining: Optional[int] = None

class RoleOption(BaseModel):
    id: InterviewRole
    label: str

class LevelOption(BaseModel):
    id: InterviewLevel
    label: str
    description: str

class CatalogResponse(BaseModel):
    roles: List[RoleOption]
    levels: List[LevelOption]
    durations: List[int]
    voices: Dict[str, str]

def to_question_schema(question: Question, hints_visible: bool) -> QuestionSchema:
    return QuestionSchema(
        id=question.id,
        category=question.category,
        prompt=question.prompt,
        difficulty=question.difficulty,
        hints=list(question.hints) if hints_visible else [],
        follow_up=question.follow_up,
    )

def to_session_response(controller: InterviewController, outcome: Optional[ActionOutcome] = None) -> SessionResponse:
    ctx = controller.snapshot()
    question = controller.current_question
    return SessionResponse(
        session_id=ctx.session_id,
        stage=ctx.stage,
        role=ctx.selection.role,
        level=ctx.selection.level,
        duration_minutes=ctx.selection.duration_minutes,
        current_question_index=ctx.current_question_index,
        total_questions=len(controller.questions),
        progress=controller.progress,
        current_question=to_question_schema(question, ctx.hints_visible) if question else None,
        current_answer=ctx.current_answer,
        answers=ctx.answers,
        elapsed_seconds=ctx.elapsed_seconds,
        paywall_visible=ctx.paywall_visible,
        hints_visible=ctx.hints_visible,
        voice_enabled=ctx.voice_enabled,
        is_grading=ctx.is_grading,
        is_transcribing=ctx.is_transcribing,
        mood=ctx.mood,
        last_error=ctx.last_error,
        narration=ctx.narration,
        overall_score=controller.overall_score(),
        remaining_free_interviews=controller.remaining_free_interviews(),
        outcome=OutcomeSchema(
            accepted=outcome.accepted,
            reason=outcome.reason,
            event=outcome.event.value if outcome.event else None,
        ) if outcome else None,
    )
