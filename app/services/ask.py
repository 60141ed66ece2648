import logging

import httpx

from app.config import Settings
from app.mappers.response_assembler import assemble_response
from app.schemas.responses import AskResponse
from app.services.completion import CompletionService
from app.services.elevenlabs import ElevenLabsService
from app.services.hospital_scraper import HospitalScraperService
from app.services.reply_composer import ReplyComposer
from app.services.transcription import TranscriptionService

logger = logging.getLogger(__name__)


class AskService:
    def __init__(
        self,
        scraper: HospitalScraperService,
        transcriber: TranscriptionService,
        composer: ReplyComposer,
        synthesizer: ElevenLabsService,
    ):
        self._scraper = scraper
        self._transcriber = transcriber
        self._composer = composer
        self._synthesizer = synthesizer

    async def run(self, audio: bytes) -> AskResponse:
        """Scrape, transcribe, compose, synthesize. Each upstream is called once."""
        facts = await self._scraper.scrape()
        user_text = await self._transcriber.transcribe(audio)
        reply = await self._composer.compose(user_text, facts)
        logger.info("Reply (%s): %s", reply.language, reply.text)
        speech = await self._synthesizer.synthesize(reply.text)
        return assemble_response(reply, speech)


def build_ask_service(client: httpx.AsyncClient, settings: Settings) -> AskService:
    completion = CompletionService(
        settings.openai_api_key,
        model=settings.completion_model,
        temperature=settings.completion_temperature,
        http_client=client,
    )
    return AskService(
        scraper=HospitalScraperService(client, settings.hospital_url),
        transcriber=TranscriptionService(
            settings.openai_api_key,
            model=settings.transcription_model,
            language=settings.transcription_language,
            http_client=client,
        ),
        composer=ReplyComposer(completion),
        synthesizer=ElevenLabsService(
            client,
            settings.elevenlabs_api_key,
            settings.elevenlabs_voice_id,
            model_id=settings.elevenlabs_model_id,
            stability=settings.voice_stability,
            similarity_boost=settings.voice_similarity_boost,
        ),
    )
