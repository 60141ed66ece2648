import logging

import httpx

from app.exceptions.custom import SynthesisFailed

logger = logging.getLogger(__name__)

TEXT_TO_SPEECH_URL = "https://api.elevenlabs.io/v1/text-to-speech"


class ElevenLabsService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        voice_id: str,
        model_id: str = "eleven_multilingual_v2",
        stability: float = 0.5,
        similarity_boost: float = 0.75,
    ):
        self._client = client
        self._headers = {
            "xi-api-key": api_key,
            "Content-Type": "application/json",
            "Accept": "audio/mpeg",
        }
        self._voice_id = voice_id
        self._model_id = model_id
        self._voice_settings = {
            "stability": stability,
            "similarity_boost": similarity_boost,
        }

    async def synthesize(self, text: str) -> bytes:
        """Render text to MPEG audio with the configured voice."""
        payload = {
            "text": text,
            "model_id": self._model_id,
            "voice_settings": self._voice_settings,
        }
        url = f"{TEXT_TO_SPEECH_URL}/{self._voice_id}"

        try:
            resp = await self._client.post(url, json=payload, headers=self._headers)
        except httpx.HTTPError as exc:
            raise SynthesisFailed(f"ElevenLabs unreachable: {exc}") from exc

        if resp.status_code >= 400:
            raise SynthesisFailed(resp.text, status_code=resp.status_code)

        logger.info("Synthesized %d bytes of audio", len(resp.content))
        return resp.content
