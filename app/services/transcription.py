import logging
import tempfile
from pathlib import Path

import httpx
from openai import AsyncOpenAI, OpenAIError

from app.exceptions.custom import TranscriptionFailed

logger = logging.getLogger(__name__)

_STAGED_FILENAME = "recording.webm"


class TranscriptionService:
    def __init__(
        self,
        api_key: str,
        model: str = "whisper-1",
        language: str = "te",
        http_client: httpx.AsyncClient | None = None,
    ):
        self._client = AsyncOpenAI(api_key=api_key, max_retries=0, http_client=http_client)
        self._model = model
        self._language = language

    async def transcribe(self, audio: bytes) -> str:
        """Send the recording to Whisper and return the recognized text.

        The audio is staged in a temporary directory that is removed once the
        call returns or fails.
        """
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / _STAGED_FILENAME
            path.write_bytes(audio)
            try:
                with path.open("rb") as f:
                    result = await self._client.audio.transcriptions.create(
                        file=f,
                        model=self._model,
                        language=self._language,
                    )
            except OpenAIError as exc:
                raise TranscriptionFailed(
                    str(exc), status_code=getattr(exc, "status_code", None)
                ) from exc

        logger.info("Transcription: %s", result.text)
        return result.text
