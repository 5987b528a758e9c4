from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from packages.ais_core.config import AISConfig
from packages.ais_qbank.domain import InterviewRole, InterviewLevel
from .state import InterviewStage, InterviewerMood, RejectionReason, SessionEvent

class InterviewSelection(BaseModel):
    """
    Role, level and duration chosen on the setup screen.
    Duration is advisory only; nothing ends the interview when it runs out.
    """
    role: Optional[InterviewRole] = None
    level: Optional[InterviewLevel] = None
    duration_minutes: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        return self.role is not None and self.level is not None and self.duration_minutes is not None

class AnswerRecord(BaseModel):
    """
    One graded answer. Immutable once recorded.
    """
    model_config = ConfigDict(frozen=True)

    question_id: str
    answer: str
    timestamp: datetime
    score: int = Field(..., ge=0, le=100)
    feedback: str
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)

class NarrationClip(BaseModel):
    """
    One line the interviewer said, in order.
    `has_audio` is set when synthesized speech is held for download.
    """
    index: int
    text: str
    has_audio: bool = False
    audio_format: Optional[str] = None

class SessionContext(BaseModel):
    """
    Runtime state of one interview session.
    Mutated only by the InterviewController.
    """
    session_id: str
    stage: InterviewStage = InterviewStage.SETUP
    selection: InterviewSelection = Field(default_factory=InterviewSelection)
    current_question_index: int = 0
    current_answer: str = ""
    answers: List[AnswerRecord] = Field(default_factory=list)

    elapsed_seconds: int = 0
    timer_started: bool = False

    paywall_visible: bool = False
    hints_visible: bool = False
    voice_enabled: bool = True

    is_grading: bool = False
    is_speaking: bool = False
    is_recording: bool = False
    is_transcribing: bool = False

    mood: InterviewerMood = InterviewerMood.NEUTRAL
    last_error: Optional[str] = None
    narration: List[NarrationClip] = Field(default_factory=list)

class ControllerTimings(BaseModel):
    """
    Pacing delays and provider timeouts used by the controller.
    Delays are presentation only. The HTTP API and tests run without them
    (see without_pacing); a remote client paces playback itself.
    """
    intro_settle_delay: float = 2.0
    feedback_settle_delay: float = 2.0
    first_question_delay: float = 4.0
    next_question_delay: float = 0.5
    narration_timeout: Optional[float] = 60.0
    transcription_timeout: Optional[float] = 30.0

    @classmethod
    def from_config(cls, config: AISConfig) -> "ControllerTimings":
        return cls(
            intro_settle_delay=config.INTRO_SETTLE_DELAY_SEC,
            feedback_settle_delay=config.FEEDBACK_SETTLE_DELAY_SEC,
            first_question_delay=config.FIRST_QUESTION_DELAY_SEC,
            next_question_delay=config.NEXT_QUESTION_DELAY_SEC,
            # Covers the provider's own retries
            narration_timeout=config.NARRATION_TIMEOUT_SEC * (config.NARRATION_MAX_RETRIES + 1),
            transcription_timeout=config.TRANSCRIPTION_TIMEOUT_SEC,
        )

    def without_pacing(self) -> "ControllerTimings":
        """Same timeouts, zero presentation delays."""
        return self.model_copy(update={
            "intro_settle_delay": 0,
            "feedback_settle_delay": 0,
            "first_question_delay": 0,
            "next_question_delay": 0,
        })

    @classmethod
    def immediate(cls) -> "ControllerTimings":
        return cls().without_pacing()

class ActionOutcome(BaseModel):
    """
    Result of a controller request.
    A rejected request left the session untouched (apart from the paywall overlay).
    """
    accepted: bool
    reason: Optional[RejectionReason] = None
    event: Optional[SessionEvent] = None
    record: Optional[AnswerRecord] = None

    @classmethod
    def ok(cls, event: Optional[SessionEvent] = None, record: Optional[AnswerRecord] = None) -> "ActionOutcome":
        return cls(accepted=True, event=event, record=record)

    @classmethod
    def rejected(cls, reason: RejectionReason, event: Optional[SessionEvent] = None) -> "ActionOutcome":
        return cls(accepted=False, reason=reason, event=event)
