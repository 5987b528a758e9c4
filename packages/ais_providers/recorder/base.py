from abc import ABC, abstractmethod

class IAudioRecorder(ABC):
    """
    Microphone capture. Raises RecordingError when the device is unavailable.
    """
    @abstractmethod
    async def start(self) -> None:
        pass

    @abstractmethod
    async def stop(self) -> bytes:
        """Stop capturing and return the recorded audio."""
        pass
