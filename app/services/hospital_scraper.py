import logging

import httpx

from app.exceptions.custom import UpstreamFetchFailed
from app.mappers.facts_extractor import extract_facts
from app.schemas.facts import FactsRecord

logger = logging.getLogger(__name__)

_TIMEOUT = 10.0
_USER_AGENT = "HospitalVoiceAssistant/1.0"


class HospitalScraperService:
    def __init__(self, client: httpx.AsyncClient, url: str):
        self._client = client
        self._url = url

    async def scrape(self) -> FactsRecord:
        """Fetch the live homepage and extract its facts. Fetch errors abort."""
        html = await self._fetch_page()
        facts = extract_facts(html)
        logger.info(
            "Scraped %s: %d contact numbers, %d services, %d doctors",
            self._url,
            len(facts.contact_numbers),
            len(facts.services),
            len(facts.doctors),
        )
        return facts

    async def _fetch_page(self) -> str:
        try:
            resp = await self._client.get(
                self._url,
                follow_redirects=True,
                timeout=_TIMEOUT,
                headers={"User-Agent": _USER_AGENT},
            )
        except httpx.HTTPError as exc:
            raise UpstreamFetchFailed(f"Could not reach {self._url}: {exc}") from exc

        if resp.status_code != 200:
            raise UpstreamFetchFailed(
                f"Unexpected response from {self._url}", status_code=resp.status_code
            )
        return resp.text
