from packages.ais_core.errors import RecordingError
from packages.ais_providers.recorder.base import IAudioRecorder

class MockAudioRecorder(IAudioRecorder):
    def __init__(self, audio: bytes = b"RIFF-mock-audio", deny_access: bool = False):
        self.audio = audio
        self.deny_access = deny_access
        self.active = False
        self.start_calls = 0

    async def start(self) -> None:
        if self.deny_access:
            raise RecordingError("Microphone access denied")
        self.start_calls += 1
        self.active = True

    async def stop(self) -> bytes:
        self.active = False
        return self.audio
