# morph_adapter\adapters\base_adapter.py
import httpx
import structlog
from typing import Any, Dict, Optional

from morph_adapter.core.domain.exceptions import RequestUrlError
from morph_adapter.core.domain.models import Homonym
from morph_adapter.core.ports.morphology_service import IMorphologyService
from morph_adapter.shared.config import settings

logger = structlog.get_logger()

class BaseAdapter(IMorphologyService):
    """
    Base class for morphology service clients.

    Provides the HTTP fetch and the fetch-then-transform lookup. Subclasses
    supply `prepare_request_url()` and `transform()` for their service.
    There are no retries: a failed request propagates to the caller.
    """

    def __init__(self, user_agent: Optional[str] = None):
        self.headers = {"User-Agent": user_agent or settings.HTTP_USER_AGENT}

    async def fetch(self, lang_code: str, word: str) -> Dict[str, Any]:
        """
        Issues one GET against the prepared URL and parses the body as JSON.

        Raises:
            RequestUrlError: no URL can be prepared for the language.
            httpx.HTTPError: network failure or non-2xx status.
            ValueError: the body is not valid JSON.
        """
        url = self.prepare_request_url(lang_code, word)
        if not url:
            raise RequestUrlError(lang_code)

        async with httpx.AsyncClient(headers=self.headers) as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
                return response.json()
            except httpx.HTTPError as e:
                logger.error("morph_fetch_failed", url=url, error=str(e))
                raise
            except ValueError as e:
                logger.error("morph_response_not_json", url=url, error=str(e))
                raise

    async def fetch_test_data(self, lang_code: str, word: str) -> Dict[str, Any]:
        """Canned response for a word; adapters with fixtures override this."""
        return {}

    async def get_homonym(self, lang_code: str, word: str) -> Optional[Homonym]:
        json_obj = await self.fetch(lang_code, word)
        if not json_obj:
            logger.info("morph_no_data", lang=lang_code, word=word)
            return None
        return self.transform(json_obj, word)
