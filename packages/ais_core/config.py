from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from packages.ais_core.errors import ConfigurationError

class AISConfig(BaseSettings):
    """
    Application-wide settings.
    Values are loaded from the environment and the .env file.
    """
    PROJECT_NAME: str = "AI Interview Studio"
    VERSION: str = "0.1.0"

    # Free tier quota (interviews started per calendar day)
    DAILY_FREE_INTERVIEW_LIMIT: int = 3

    # Voice (narration / transcription)
    VOICE_ENABLED: bool = True
    OPENAI_API_KEY: Optional[str] = None
    TTS_MODEL: str = "tts-1-hd"
    TTS_VOICE: str = "alloy"
    TTS_SPEED: float = 1.15
    STT_MODEL: str = "whisper-1"
    NARRATION_TIMEOUT_SEC: float = 15.0
    NARRATION_MAX_RETRIES: int = 3
    TRANSCRIPTION_TIMEOUT_SEC: float = 30.0

    # Pacing (presentation only). The HTTP API ignores these unless SERVER_PACING is set
    SERVER_PACING: bool = False
    INTRO_SETTLE_DELAY_SEC: float = 2.0
    FEEDBACK_SETTLE_DELAY_SEC: float = 2.0
    FIRST_QUESTION_DELAY_SEC: float = 4.0
    NEXT_QUESTION_DELAY_SEC: float = 0.5

    # Storage
    USAGE_STORE_PATH: str = "data/usage.json"
    QUESTION_BANK_PATH: Optional[str] = None

    MOCK_LATENCY_MS: int = 0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def voice_available(self) -> bool:
        return self.VOICE_ENABLED and bool(self.OPENAI_API_KEY)

    @classmethod
    def load(cls) -> "AISConfig":
        """
        Load settings, wrapping validation errors in ConfigurationError.
        """
        try:
            return cls()
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e
