import asyncio
from typing import Dict, Optional

from openai import (
    AsyncOpenAI,
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    AuthenticationError,
    RateLimitError,
)

from packages.ais_core.config import AISConfig
from packages.ais_core.dto import SpeechResultDTO
from packages.ais_core.errors import NarrationError
from packages.ais_core.logging import get_logger
from packages.ais_providers.tts.base import INarrationProvider

logger = get_logger("ais_providers.tts.openai")

AVAILABLE_VOICES: Dict[str, str] = {
    "alloy": "Balanced and confident",
    "echo": "Clear and articulate",
    "fable": "Expressive and warm",
    "onyx": "Deep and professional",
    "nova": "Friendly and energetic",
    "shimmer": "Soft and pleasant",
}

class OpenAINarrationProvider(INarrationProvider):
    """
    Narration through the OpenAI speech endpoint.

    Rate limits, 5xx responses, timeouts and connection drops are retried with
    exponential backoff (1s, 2s, 4s ...). Anything still failing is raised as
    NarrationError. Playback of the returned audio is up to the client.
    """

    def __init__(self, config: AISConfig, client: Optional[AsyncOpenAI] = None, voice: Optional[str] = None):
        self.config = config
        self.model = config.TTS_MODEL
        self.speed = config.TTS_SPEED
        self.max_retries = config.NARRATION_MAX_RETRIES
        self.backoff_base_sec = 1.0
        self.voice = voice or config.TTS_VOICE
        if self.voice not in AVAILABLE_VOICES:
            raise ValueError(f"Unknown voice: {self.voice}")
        self.client = client or AsyncOpenAI(
            api_key=config.OPENAI_API_KEY,
            timeout=config.NARRATION_TIMEOUT_SEC,
            max_retries=0,
        )

    def select_voice(self, voice: str) -> None:
        if voice not in AVAILABLE_VOICES:
            raise ValueError(f"Unknown voice: {voice}")
        self.voice = voice

    async def speak(self, text: str) -> SpeechResultDTO:
        attempt = 0
        while True:
            try:
                response = await self.client.audio.speech.create(
                    model=self.model,
                    voice=self.voice,
                    input=text,
                    speed=self.speed,
                )
                logger.info(f"[TTS] Synthesized {len(text)} chars with voice {self.voice}")
                return SpeechResultDTO(text=text, voice=self.voice, audio=response.content, audio_format="mp3")
            except AuthenticationError as e:
                logger.error("[TTS] Invalid OpenAI API key.")
                raise NarrationError("Invalid OpenAI API key", details={"status": e.status_code}) from e
            except (RateLimitError, APITimeoutError, APIConnectionError, APIStatusError) as e:
                if not self._is_retryable(e) or attempt >= self.max_retries:
                    logger.error(f"[TTS] Narration failed after {attempt + 1} attempt(s): {e}")
                    raise NarrationError(f"TTS request failed: {e}") from e
                delay = self.backoff_base_sec * (2 ** attempt)
                attempt += 1
                logger.warning(f"[TTS] Retrying in {delay:.1f}s (attempt {attempt}/{self.max_retries}): {e}")
                await asyncio.sleep(delay)

    @staticmethod
    def _is_retryable(error: Exception) -> bool:
        if isinstance(error, (RateLimitError, APITimeoutError, APIConnectionError)):
            return True
        if isinstance(error, APIStatusError):
            return error.status_code >= 500
        return False
