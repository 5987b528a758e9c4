from abc import ABC, abstractmethod
from packages.ais_core.dto import TranscriptDTO

class ISTTProvider(ABC):
    @abstractmethod
    async def transcribe(self, audio: bytes) -> TranscriptDTO:
        """
        Raw recorded audio is passed, returns TranscriptDTO.
        Raises TranscriptionError on failure.
        """
        pass
