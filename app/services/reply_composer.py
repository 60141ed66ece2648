import logging

from app.mappers.intents import INTENTS, Intent, detect_language, match_intent
from app.schemas.facts import FactsRecord
from app.schemas.responses import Language, Reply
from app.services.completion import CompletionService

logger = logging.getLogger(__name__)

MAX_REPLY_WORDS = 35

APOLOGY: dict[str, str] = {
    "te": "క్షమించండి, నేను మీ అభ్యర్థనను ప్రస్తుతం ప్రాసెస్ చేయలేకపోతున్నాను. దయచేసి హాస్పిటల్‌కి నేరుగా కాల్ చేయండి.",
    "en": "I apologize, I am unable to process your request at the moment. Please call the hospital directly.",
}

HANDOFF_PHRASE: dict[str, str] = {
    "te": "మిమ్మల్ని మా ప్రతినిధికి కనెక్ట్ చేస్తాను.",
    "en": "I will connect you to our representative.",
}

_LANGUAGE_NAMES = {"te": "Telugu", "en": "English"}

_PROMPT_TEMPLATE = (
    "You are a friendly voice assistant for Amma Hospital in Anantapur. "
    "Use the following data for facts:\n"
    "<JSON data>\n{facts}\n</JSON data>\n"
    'User asked: "{question}"\n'
    "Give a short, clear spoken reply in {language}. "
    'If you cannot find a fact, say: "{handoff}" '
    "Keep length under {max_words} words."
)


def build_fallback_prompt(user_text: str, facts: FactsRecord, lang: Language) -> str:
    return _PROMPT_TEMPLATE.format(
        facts=facts.model_dump_json(),
        question=user_text,
        language=_LANGUAGE_NAMES[lang],
        handoff=HANDOFF_PHRASE[lang],
        max_words=MAX_REPLY_WORDS,
    )


class ReplyComposer:
    def __init__(
        self,
        completion: CompletionService,
        intents: tuple[Intent, ...] = INTENTS,
    ):
        self._completion = completion
        self._intents = intents

    async def compose(self, user_text: str, facts: FactsRecord) -> Reply:
        lang = detect_language(user_text)

        intent = match_intent(user_text, self._intents)
        if intent is not None:
            logger.info("Matched intent %s (lang=%s)", intent.name, lang)
            return Reply(text=intent.render(facts, lang), language=lang)

        answer = await self._completion.complete(
            build_fallback_prompt(user_text, facts, lang)
        )
        if not answer:
            logger.warning("Fallback reply unavailable, using apology (lang=%s)", lang)
            return Reply(text=APOLOGY[lang], language=lang)
        return Reply(text=answer, language=lang)
