from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from packages.ais_core.config import AISConfig
from packages.ais_core.dto import TranscriptDTO
from packages.ais_core.errors import TranscriptionError
from packages.ais_core.logging import get_logger
from packages.ais_providers.stt.base import ISTTProvider

logger = get_logger("ais_providers.stt.openai")

# Vocabulary hint for technical interview answers
CUSTOM_VOCAB = (
    "JavaScript, TypeScript, React, Next.js, SSR, REST API, GraphQL, WebSocket, SQL, NoSQL, "
    "Kafka, Spark, ETL, JWT, Docker, Kubernetes, setTimeout, clearTimeout, MLOps"
)

class OpenAISTTProvider(ISTTProvider):
    def __init__(self, config: AISConfig, client: Optional[AsyncOpenAI] = None, filename: str = "answer.webm"):
        self.config = config
        self.model = config.STT_MODEL
        self.filename = filename
        self.client = client or AsyncOpenAI(
            api_key=config.OPENAI_API_KEY,
            timeout=config.TRANSCRIPTION_TIMEOUT_SEC,
        )

    async def transcribe(self, audio: bytes) -> TranscriptDTO:
        if not audio:
            raise TranscriptionError("No audio captured")
        try:
            transcript = await self.client.audio.transcriptions.create(
                model=self.model,
                file=(self.filename, audio),
                language="en",
                prompt=f"This is a technical interview. Keywords: {CUSTOM_VOCAB}",
                temperature=0.2,
            )
        except OpenAIError as e:
            logger.error(f"[STT] Transcription failed: {e}")
            raise TranscriptionError(f"Failed to transcribe audio: {e}") from e

        logger.info(f"[STT] Transcribed {len(audio)} bytes into {len(transcript.text)} chars")
        return TranscriptDTO(text=transcript.text, language="en")
