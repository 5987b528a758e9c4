from pydantic import BaseModel, ConfigDict

class BaseDTO(BaseModel):
    """
    Base class for every DTO in the project.

    Features:
        - from_attributes=True (build from plain objects)
        - str_strip_whitespace=True (strip surrounding whitespace)
    """
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        populate_by_name=True
    )


# -------------------------------------------------------------------------
# STT Provider DTOs
# -------------------------------------------------------------------------
class TranscriptSegmentDTO(BaseDTO):
    start: float
    end: float
    text: str

class TranscriptDTO(BaseDTO):
    text: str
    language: str | None = None
    segments: list[TranscriptSegmentDTO] = []


# -------------------------------------------------------------------------
# Narration (TTS) Provider DTOs
# -------------------------------------------------------------------------
class SpeechResultDTO(BaseDTO):
    text: str
    voice: str | None = None
    audio: bytes = b""
    audio_format: str = "mp3"
