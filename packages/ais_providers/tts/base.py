from abc import ABC, abstractmethod
from packages.ais_core.dto import SpeechResultDTO

class INarrationProvider(ABC):
    @abstractmethod
    async def speak(self, text: str) -> SpeechResultDTO:
        """
        Synthesize and play the given text.
        Returning means narration completed; raising NarrationError means it failed.
        """
        pass
