import logging

import httpx
from openai import AsyncOpenAI

logger = logging.getLogger(__name__)


class CompletionService:
    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        temperature: float = 0.5,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._client = AsyncOpenAI(api_key=api_key, max_retries=0, http_client=http_client)
        self._model = model
        self._temperature = temperature

    async def complete(self, prompt: str) -> str | None:
        """Single-message completion. Returns the trimmed reply, or None on any failure."""
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self._temperature,
            )
            text = (response.choices[0].message.content or "").strip()
        except Exception:
            logger.exception("Completion call failed")
            return None

        logger.info("LLM reply: %s", text)
        return text or None
