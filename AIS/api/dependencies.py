from functools import lru_cache
from typing import Optional

from packages.ais_core.config import AISConfig
from packages.ais_core.logging import get_logger
from packages.ais_providers.stt.base import ISTTProvider
from packages.ais_providers.stt.openai_impl import OpenAISTTProvider
from packages.ais_providers.tts.base import INarrationProvider
from packages.ais_providers.tts.openai_impl import OpenAINarrationProvider
from packages.ais_qbank.repository import StaticQuestionBank, JsonFileQuestionBank
from packages.ais_qbank.repository_interface import QuestionBank
from packages.ais_service.interview_service import InterviewService
from packages.ais_session.dto import ControllerTimings
from packages.ais_session.infrastructure.memory_repo import MemorySessionRegistry
from packages.ais_session.policy import UsagePolicy, FreeTierPolicy
from packages.ais_session.repository import SessionRegistry
from packages.ais_usage.clock import Clock, SystemClock
from packages.ais_usage.infrastructure.file_repo import FileUsageCounterStore
from packages.ais_usage.repository import UsageCounterStore

logger = get_logger("AIS.dependencies")

@lru_cache
def get_config() -> AISConfig:
    return AISConfig.load()

# --- Providers (External Adapters) ---

@lru_cache
def get_narrator() -> Optional[INarrationProvider]:
    """
    Singleton narrator. None when voice is disabled or no API key is set;
    the controller then skips narration.
    """
    config = get_config()
    if not config.voice_available:
        logger.info("Voice narration unavailable (disabled or no OpenAI key).")
        return None
    return OpenAINarrationProvider(config)

@lru_cache
def get_transcriber() -> Optional[ISTTProvider]:
    config = get_config()
    if not config.voice_available:
        return None
    return OpenAISTTProvider(config)

# --- Repositories (Persistence) ---

@lru_cache
def get_question_bank() -> QuestionBank:
    """
    Built-in questions unless QUESTION_BANK_PATH points to a JSON bank.
    """
    config = get_config()
    if config.QUESTION_BANK_PATH:
        return JsonFileQuestionBank(config.QUESTION_BANK_PATH)
    return StaticQuestionBank()

@lru_cache
def get_usage_store() -> UsageCounterStore:
    return FileUsageCounterStore(get_config().USAGE_STORE_PATH)

@lru_cache
def get_session_registry() -> SessionRegistry:
    """
    Singleton registry. Must be shared across requests to keep sessions alive.
    """
    return MemorySessionRegistry()

@lru_cache
def get_clock() -> Clock:
    return SystemClock()

def get_policy() -> UsagePolicy:
    return FreeTierPolicy(get_config().DAILY_FREE_INTERVIEW_LIMIT)

def get_timings() -> ControllerTimings:
    """
    Pacing delays would hold HTTP requests open; clients pace playback themselves.
    """
    config = get_config()
    timings = ControllerTimings.from_config(config)
    return timings if config.SERVER_PACING else timings.without_pacing()

# --- Domain Services (Application Logic) ---

def get_interview_service() -> InterviewService:
    """
    Transient service injected with the singleton collaborators.
    """
    return InterviewService(
        registry=get_session_registry(),
        question_bank=get_question_bank(),
        usage_store=get_usage_store(),
        clock=get_clock(),
        policy=get_policy(),
        timings=get_timings(),
        narrator=get_narrator(),
        transcriber=get_transcriber(),
    )
