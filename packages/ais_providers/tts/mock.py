import asyncio
from typing import List

from packages.ais_core.dto import SpeechResultDTO
from packages.ais_core.errors import NarrationError
from packages.ais_providers.tts.base import INarrationProvider

class MockNarrationProvider(INarrationProvider):
    """
    Records every line it is asked to speak.
    Can simulate latency and failures.
    """
    def __init__(self, should_fail: bool = False, latency: float = 0.0, voice: str = "alloy", audio: bytes = b""):
        self.should_fail = should_fail
        self.latency = latency
        self.voice = voice
        self.audio = audio
        self.spoken: List[str] = []

    async def speak(self, text: str) -> SpeechResultDTO:
        self.spoken.append(text)
        if self.latency > 0:
            await asyncio.sleep(self.latency)
        if self.should_fail:
            raise NarrationError("Mock Failure: Intentional Error")
        return SpeechResultDTO(text=text, voice=self.voice, audio=self.audio)
