from typing import Optional

from packages.ais_core.errors import SessionNotFoundError
from packages.ais_core.logging import get_logger
from packages.ais_eval.engine import AnswerScorer
from packages.ais_providers.stt.base import ISTTProvider
from packages.ais_providers.tts.base import INarrationProvider
from packages.ais_qbank.repository_interface import QuestionBank
from packages.ais_report.dto import InterviewReport
from packages.ais_report.engine import ReportGenerator
from packages.ais_session.dto import ControllerTimings, InterviewSelection
from packages.ais_session.engine import InterviewController
from packages.ais_session.policy import UsagePolicy
from packages.ais_session.repository import SessionRegistry
from packages.ais_usage.clock import Clock
from packages.ais_usage.repository import UsageCounterStore

logger = get_logger("ais.service")

class InterviewService:
    """
    Application service behind the HTTP API.
    Creates controllers with the shared collaborators and looks them up by id.
    All interview rules live in InterviewController.
    """
    def __init__(
        self,
        registry: SessionRegistry,
        question_bank: QuestionBank,
        usage_store: UsageCounterStore,
        clock: Clock,
        policy: UsagePolicy,
        timings: ControllerTimings,
        narrator: Optional[INarrationProvider] = None,
        transcriber: Optional[ISTTProvider] = None,
    ):
        self.registry = registry
        self.question_bank = question_bank
        self.usage_store = usage_store
        self.clock = clock
        self.policy = policy
        self.timings = timings
        self.narrator = narrator
        self.transcriber = transcriber
        self.scorer = AnswerScorer()

    def create_session(self, voice_enabled: bool = True) -> InterviewController:
        controller = InterviewController(
            question_bank=self.question_bank,
            usage_store=self.usage_store,
            clock=self.clock,
            policy=self.policy,
            scorer=self.scorer,
            narrator=self.narrator,
            transcriber=self.transcriber,
            timings=self.timings,
        )
        controller.set_voice_enabled(voice_enabled)
        self.registry.save(controller)
        logger.info(f"Created session {controller.session_id}")
        return controller

    def get_controller(self, session_id: str) -> InterviewController:
        controller = self.registry.get(session_id)
        if controller is None:
            raise SessionNotFoundError(session_id)
        return controller

    def delete_session(self, session_id: str) -> None:
        if not self.registry.delete(session_id):
            raise SessionNotFoundError(session_id)
        logger.info(f"Deleted session {session_id}")

    def apply_selection(self, controller: InterviewController, selection: InterviewSelection) -> list:
        """
        Apply whichever of role, level and duration are set.
        Returns the rejected outcomes, empty when everything was accepted.
        """
        outcomes = []
        if selection.role is not None:
            outcomes.append(controller.select_role(selection.role.value))
        if selection.level is not None:
            outcomes.append(controller.select_level(selection.level.value))
        if selection.duration_minutes is not None:
            outcomes.append(controller.select_duration(selection.duration_minutes))
        return [o for o in outcomes if not o.accepted]

    def build_report(self, session_id: str) -> InterviewReport:
        controller = self.get_controller(session_id)
        return ReportGenerator.generate(controller.context, controller.questions)

    def interviews_used_today(self) -> int:
        return self.usage_store.get(self.clock.today_key())

    def reset_daily_usage(self) -> None:
        """Demo reset: clears the stored counter."""
        self.usage_store.clear()
        logger.warning("Daily usage counter cleared")
