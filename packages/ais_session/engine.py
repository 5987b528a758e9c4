import asyncio
import uuid
from typing import Awaitable, Callable, Dict, List, Optional

from packages.ais_core.dto import SpeechResultDTO
from packages.ais_core.errors import ProviderError
from packages.ais_core.logging import get_logger
from packages.ais_eval.engine import AnswerScorer
from packages.ais_eval.rules import round_half_up
from packages.ais_providers.recorder.base import IAudioRecorder
from packages.ais_providers.stt.base import ISTTProvider
from packages.ais_providers.tts.base import INarrationProvider
from packages.ais_qbank.domain import Question, InterviewRole, InterviewLevel, DURATION_CHOICES
from packages.ais_qbank.repository_interface import QuestionBank
from packages.ais_usage.clock import Clock, SystemClock
from packages.ais_usage.repository import UsageCounterStore
from .concurrency import TurnGuard
from .dto import SessionContext, AnswerRecord, ControllerTimings, ActionOutcome, NarrationClip
from .narration import INTRO_LINE, COMPLETION_LINE, VOICE_TEST_LINE, paywall_line, feedback_line
from .policy import UsagePolicy, FreeTierPolicy
from .state import InterviewStage, InterviewerMood, SessionEvent, RejectionReason

logger = get_logger("ais.session")

NARRATION_FAILED_MESSAGE = "Voice playback failed. The interview continues without voice."
MICROPHONE_FAILED_MESSAGE = "Microphone access denied. Please allow microphone access to use voice input."
TRANSCRIPTION_FAILED_MESSAGE = "Failed to transcribe audio. Please try again."

class InterviewController:
    """
    Drives one interview session: setup, intro, question loop, completion.

    All state lives in `self.context` and changes only through the methods here.
    Submission, start and reset are serialized by a fail-fast TurnGuard: while one
    of them is in flight (scoring, feedback narration, advancing), another request
    is rejected instead of queued, so an answer can never be recorded twice.

    Narration is awaited. A narration failure or timeout is logged and treated as
    finished so the interview never stalls on voice. Every spoken line is kept in
    `context.narration`; synthesized audio is held by index for clients to fetch.

    While a turn is in flight the pending answer is frozen: edits and
    transcripts are rejected rather than wiped by the advance.
    """
    def __init__(
        self,
        question_bank: QuestionBank,
        usage_store: UsageCounterStore,
        clock: Optional[Clock] = None,
        policy: Optional[UsagePolicy] = None,
        scorer: Optional[AnswerScorer] = None,
        narrator: Optional[INarrationProvider] = None,
        transcriber: Optional[ISTTProvider] = None,
        recorder: Optional[IAudioRecorder] = None,
        timings: Optional[ControllerTimings] = None,
        session_id: Optional[str] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.session_id = session_id or str(uuid.uuid4())
        self.question_bank = question_bank
        self.usage_store = usage_store
        self.clock = clock or SystemClock()
        self.policy = policy or FreeTierPolicy()
        self.scorer = scorer or AnswerScorer()
        self.narrator = narrator
        self.transcriber = transcriber
        self.recorder = recorder
        self.timings = timings or ControllerTimings()
        self._sleep = sleep
        self._guard = TurnGuard()
        self._narration_audio: Dict[int, SpeechResultDTO] = {}

        self.context = SessionContext(session_id=self.session_id)

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    @property
    def questions(self) -> List[Question]:
        role = self.context.selection.role
        if role is None:
            return []
        return self.question_bank.get_questions(role)

    @property
    def current_question(self) -> Optional[Question]:
        questions = self.questions
        index = self.context.current_question_index
        if 0 <= index < len(questions):
            return questions[index]
        return None

    @property
    def is_last_question(self) -> bool:
        return self.context.current_question_index >= len(self.questions) - 1

    @property
    def progress(self) -> float:
        total = len(self.questions)
        if total == 0:
            return 0.0
        return (self.context.current_question_index + 1) / total * 100

    def overall_score(self) -> int:
        """Mean of recorded scores, rounded half up. 0 when nothing is recorded."""
        answers = self.context.answers
        if not answers:
            return 0
        return round_half_up(sum(a.score for a in answers) / len(answers))

    def interviews_used_today(self) -> int:
        return self.usage_store.get(self.clock.today_key())

    def remaining_free_interviews(self) -> Optional[int]:
        return self.policy.remaining(self.interviews_used_today())

    def snapshot(self) -> SessionContext:
        return self.context.model_copy(deep=True)

    def narration_audio(self, index: int) -> Optional[SpeechResultDTO]:
        return self._narration_audio.get(index)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def select_role(self, role: str) -> ActionOutcome:
        if self.context.stage != InterviewStage.SETUP:
            return ActionOutcome.rejected(RejectionReason.WRONG_STAGE)
        try:
            self.context.selection.role = InterviewRole(role)
        except ValueError:
            return ActionOutcome.rejected(RejectionReason.INVALID_SELECTION)
        return ActionOutcome.ok()

    def select_level(self, level: str) -> ActionOutcome:
        if self.context.stage != InterviewStage.SETUP:
            return ActionOutcome.rejected(RejectionReason.WRONG_STAGE)
        try:
            self.context.selection.level = InterviewLevel(level)
        except ValueError:
            return ActionOutcome.rejected(RejectionReason.INVALID_SELECTION)
        return ActionOutcome.ok()

    def select_duration(self, minutes: int) -> ActionOutcome:
        if self.context.stage != InterviewStage.SETUP:
            return ActionOutcome.rejected(RejectionReason.WRONG_STAGE)
        if minutes not in DURATION_CHOICES:
            return ActionOutcome.rejected(RejectionReason.INVALID_SELECTION)
        self.context.selection.duration_minutes = minutes
        return ActionOutcome.ok()

    async def start_interview(self) -> ActionOutcome:
        """
        Consume one interview from today's quota and run the intro.

        The quota is checked before the selection: a user out of interviews
        sees the paywall even with an incomplete setup.
        """
        ctx = self.context
        if ctx.stage != InterviewStage.SETUP:
            return ActionOutcome.rejected(RejectionReason.WRONG_STAGE)
        if self._guard.busy:
            return ActionOutcome.rejected(RejectionReason.OPERATION_IN_FLIGHT)

        today = self.clock.today_key()
        if self.policy.has_reached_limit(self.usage_store.get(today)):
            ctx.paywall_visible = True
            logger.info(f"[{SessionEvent.PAYWALL_SHOWN.value}] Session {self.session_id} hit the daily limit")
            await self._narrate(paywall_line(self.policy.daily_limit))
            return ActionOutcome.rejected(RejectionReason.QUOTA_EXCEEDED, event=SessionEvent.PAYWALL_SHOWN)

        if not ctx.selection.is_complete:
            return ActionOutcome.rejected(RejectionReason.CONFIG_INCOMPLETE)
        if not self.questions:
            return ActionOutcome.rejected(RejectionReason.NO_QUESTIONS)

        with self._guard.acquire(self.session_id):
            count = self.usage_store.increment(today)
            ctx.stage = InterviewStage.INTRO
            ctx.mood = InterviewerMood.SPEAKING
            logger.info(
                f"[{SessionEvent.INTERVIEW_STARTED.value}] Session {self.session_id} "
                f"role={ctx.selection.role.value} level={ctx.selection.level.value} "
                f"(interview {count} today)"
            )

            await self._narrate(INTRO_LINE)
            await self._sleep(self.timings.intro_settle_delay)

            ctx.stage = InterviewStage.INTERVIEW
            await self._present_current_question()

        return ActionOutcome.ok(event=SessionEvent.INTERVIEW_STARTED)

    def dismiss_paywall(self) -> None:
        self.context.paywall_visible = False

    # ------------------------------------------------------------------
    # Question loop
    # ------------------------------------------------------------------
    def tick(self, seconds: int = 1) -> int:
        """Advance the elapsed timer. Counts only while the interview stage is running."""
        ctx = self.context
        if ctx.stage == InterviewStage.INTERVIEW and ctx.timer_started:
            ctx.elapsed_seconds += seconds
        return ctx.elapsed_seconds

    def update_answer(self, text: str) -> ActionOutcome:
        if self.context.stage != InterviewStage.INTERVIEW:
            return ActionOutcome.rejected(RejectionReason.WRONG_STAGE)
        if self._guard.busy:
            return ActionOutcome.rejected(RejectionReason.OPERATION_IN_FLIGHT)
        self.context.current_answer = text
        return ActionOutcome.ok()

    def toggle_hints(self) -> bool:
        if self.context.stage == InterviewStage.INTERVIEW:
            self.context.hints_visible = not self.context.hints_visible
        return self.context.hints_visible

    def set_voice_enabled(self, enabled: bool) -> None:
        self.context.voice_enabled = enabled
        if not enabled:
            self.context.is_speaking = False
            if self.context.mood == InterviewerMood.SPEAKING:
                self.context.mood = InterviewerMood.NEUTRAL

    async def repeat_question(self) -> ActionOutcome:
        question = self.current_question
        if self.context.stage != InterviewStage.INTERVIEW or question is None:
            return ActionOutcome.rejected(RejectionReason.WRONG_STAGE)
        await self._narrate(question.prompt)
        return ActionOutcome.ok()

    async def test_voice(self) -> bool:
        return await self._narrate(VOICE_TEST_LINE)

    async def submit_answer(self) -> ActionOutcome:
        """
        Grade the current answer, record it, narrate feedback, then advance
        or complete the interview.
        """
        ctx = self.context
        if ctx.stage != InterviewStage.INTERVIEW:
            return ActionOutcome.rejected(RejectionReason.WRONG_STAGE)
        if self._guard.busy:
            logger.warning(f"Session {self.session_id}: submission rejected, another turn is in flight")
            return ActionOutcome.rejected(RejectionReason.OPERATION_IN_FLIGHT)

        answer_text = ctx.current_answer.strip()
        if not answer_text:
            return ActionOutcome.rejected(RejectionReason.EMPTY_ANSWER)

        question = self.current_question
        with self._guard.acquire(self.session_id):
            ctx.is_grading = True
            ctx.mood = InterviewerMood.THINKING
            try:
                result = await asyncio.to_thread(self.scorer.score, question, answer_text)
            finally:
                ctx.is_grading = False

            record = AnswerRecord(
                question_id=question.id,
                answer=answer_text,
                timestamp=self.clock.now(),
                score=result.score,
                feedback=result.feedback,
                strengths=result.strengths,
                improvements=result.improvements,
            )
            ctx.answers.append(record)
            ctx.current_answer = ""
            logger.info(
                f"[{SessionEvent.ANSWER_RECORDED.value}] Session {self.session_id} "
                f"question={question.id} score={record.score}"
            )

            is_last = self.is_last_question
            ctx.mood = InterviewerMood.POSITIVE if record.score >= 70 else InterviewerMood.NEUTRAL
            await self._narrate(feedback_line(record.score, is_last))
            await self._sleep(self.timings.feedback_settle_delay)

            if is_last:
                ctx.stage = InterviewStage.COMPLETE
                ctx.hints_visible = False
                event = SessionEvent.INTERVIEW_COMPLETED
                logger.info(
                    f"[{event.value}] Session {self.session_id} finished with "
                    f"overall score {self.overall_score()}"
                )
                await self._narrate(COMPLETION_LINE)
            else:
                ctx.current_question_index += 1
                ctx.hints_visible = False
                event = SessionEvent.QUESTION_ADVANCED
                await self._present_current_question()

        return ActionOutcome.ok(event=event, record=record)

    async def previous_question(self) -> ActionOutcome:
        """Step back one question. Recorded answers are left alone."""
        ctx = self.context
        if ctx.stage != InterviewStage.INTERVIEW:
            return ActionOutcome.rejected(RejectionReason.WRONG_STAGE)
        if self._guard.busy:
            return ActionOutcome.rejected(RejectionReason.OPERATION_IN_FLIGHT)
        if ctx.current_question_index == 0:
            return ActionOutcome.rejected(RejectionReason.AT_FIRST_QUESTION)

        ctx.current_question_index -= 1
        ctx.hints_visible = False
        logger.info(f"[{SessionEvent.QUESTION_REWOUND.value}] Session {self.session_id} back to question {ctx.current_question_index + 1}")
        await self._present_current_question()
        return ActionOutcome.ok(event=SessionEvent.QUESTION_REWOUND)

    def new_interview(self) -> ActionOutcome:
        """Return to setup after completion. Keeps the voice preference."""
        if self.context.stage != InterviewStage.COMPLETE:
            return ActionOutcome.rejected(RejectionReason.WRONG_STAGE)
        if self._guard.busy:
            return ActionOutcome.rejected(RejectionReason.OPERATION_IN_FLIGHT)

        voice_enabled = self.context.voice_enabled
        self.context = SessionContext(session_id=self.session_id, voice_enabled=voice_enabled)
        self._narration_audio.clear()
        logger.info(f"[{SessionEvent.SESSION_RESET.value}] Session {self.session_id} back to setup")
        return ActionOutcome.ok(event=SessionEvent.SESSION_RESET)

    # ------------------------------------------------------------------
    # Voice input
    # ------------------------------------------------------------------
    async def start_recording(self) -> ActionOutcome:
        ctx = self.context
        if ctx.stage != InterviewStage.INTERVIEW:
            return ActionOutcome.rejected(RejectionReason.WRONG_STAGE)
        if self.recorder is None:
            return ActionOutcome.rejected(RejectionReason.RECORDING_UNAVAILABLE)
        if self._guard.busy:
            return ActionOutcome.rejected(RejectionReason.OPERATION_IN_FLIGHT)
        if ctx.is_recording or ctx.is_transcribing:
            return ActionOutcome.rejected(RejectionReason.ALREADY_RECORDING)

        ctx.is_recording = True
        try:
            await self.recorder.start()
        except ProviderError as e:
            ctx.is_recording = False
            ctx.last_error = MICROPHONE_FAILED_MESSAGE
            logger.error(f"Session {self.session_id}: could not start recording: {e}")
            return ActionOutcome.rejected(RejectionReason.RECORDING_FAILED)

        ctx.last_error = None
        ctx.mood = InterviewerMood.LISTENING
        return ActionOutcome.ok()

    async def stop_recording(self) -> ActionOutcome:
        """Stop capture and append the transcript of what was recorded."""
        ctx = self.context
        if not ctx.is_recording:
            return ActionOutcome.rejected(RejectionReason.NOT_RECORDING)

        ctx.is_recording = False
        try:
            audio = await self.recorder.stop()
        except ProviderError as e:
            ctx.last_error = MICROPHONE_FAILED_MESSAGE
            logger.error(f"Session {self.session_id}: could not stop recording: {e}")
            return ActionOutcome.rejected(RejectionReason.RECORDING_FAILED)

        return await self.append_transcription(audio)

    async def append_transcription(self, audio: bytes) -> ActionOutcome:
        """
        Transcribe audio and append the text to the current answer,
        separated by one space from any existing text.
        On failure the answer is left exactly as it was.
        """
        ctx = self.context
        if ctx.stage != InterviewStage.INTERVIEW:
            return ActionOutcome.rejected(RejectionReason.WRONG_STAGE)
        if self.transcriber is None:
            return ActionOutcome.rejected(RejectionReason.TRANSCRIPTION_UNAVAILABLE)
        if ctx.is_transcribing or self._guard.busy:
            return ActionOutcome.rejected(RejectionReason.OPERATION_IN_FLIGHT)

        answered = len(ctx.answers)
        ctx.is_transcribing = True
        ctx.mood = InterviewerMood.THINKING
        try:
            transcript = await asyncio.wait_for(
                self.transcriber.transcribe(audio),
                timeout=self.timings.transcription_timeout,
            )
        except (ProviderError, asyncio.TimeoutError) as e:
            ctx.last_error = TRANSCRIPTION_FAILED_MESSAGE
            logger.error(f"Session {self.session_id}: transcription failed: {e!r}")
            return ActionOutcome.rejected(RejectionReason.TRANSCRIPTION_FAILED)
        finally:
            ctx.is_transcribing = False
            ctx.mood = InterviewerMood.LISTENING

        # The answer was submitted while we were transcribing
        if self._guard.busy or len(ctx.answers) != answered or ctx.stage != InterviewStage.INTERVIEW:
            logger.warning(f"Session {self.session_id}: transcript dropped, the answer was submitted meanwhile")
            return ActionOutcome.rejected(RejectionReason.OPERATION_IN_FLIGHT)

        text = transcript.text.strip()
        if text:
            ctx.current_answer = f"{ctx.current_answer} {text}" if ctx.current_answer else text
        ctx.last_error = None
        return ActionOutcome.ok(event=SessionEvent.TRANSCRIPT_APPENDED)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    async def _present_current_question(self) -> None:
        question = self.current_question
        if question is None:
            return
        ctx = self.context
        first = ctx.current_question_index == 0
        await self._sleep(self.timings.first_question_delay if first else self.timings.next_question_delay)
        ctx.mood = InterviewerMood.SPEAKING
        if not ctx.timer_started:
            ctx.timer_started = True
        await self._narrate(question.prompt)
        ctx.mood = InterviewerMood.LISTENING

    async def _narrate(self, text: str) -> bool:
        """
        Speak a line if voice is on and log it to `context.narration`.
        Returns False when narration failed; failures never propagate.
        """
        if not self.context.voice_enabled:
            return True
        clip = NarrationClip(index=len(self.context.narration), text=text)
        self.context.narration.append(clip)
        if self.narrator is None:
            return True

        self.context.is_speaking = True
        try:
            speech = await asyncio.wait_for(self.narrator.speak(text), timeout=self.timings.narration_timeout)
            if speech.audio:
                self._narration_audio[clip.index] = speech
                clip.has_audio = True
                clip.audio_format = speech.audio_format
            return True
        except (ProviderError, asyncio.TimeoutError) as e:
            self.context.last_error = NARRATION_FAILED_MESSAGE
            logger.warning(f"Session {self.session_id}: narration failed, continuing without voice: {e!r}")
            return False
        finally:
            self.context.is_speaking = False
