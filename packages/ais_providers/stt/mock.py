import asyncio
from packages.ais_providers.stt.base import ISTTProvider
from packages.ais_core.dto import TranscriptDTO, TranscriptSegmentDTO
from packages.ais_core.errors import TranscriptionError
from packages.ais_core.config import AISConfig

class MockSTTProvider(ISTTProvider):
    def __init__(
        self,
        config: AISConfig = None,
        text: str = "This is a mock transcription result.",
        should_fail: bool = False
    ):
        self.config = config
        self.text = text
        self.should_fail = should_fail
        self.latency_ms = 0
        if config and hasattr(config, 'MOCK_LATENCY_MS'):
            self.latency_ms = config.MOCK_LATENCY_MS

    async def transcribe(self, audio: bytes) -> TranscriptDTO:
        if self.latency_ms > 0:
            await asyncio.sleep(self.latency_ms / 1000.0)

        if self.should_fail:
            raise TranscriptionError("Mock Failure: Intentional Error")

        return TranscriptDTO(
            text=self.text,
            language="en",
            segments=[TranscriptSegmentDTO(start=0.0, end=1.0, text=self.text)]
        )
