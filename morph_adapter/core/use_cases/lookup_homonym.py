# morph_adapter/core/use_cases/lookup_homonym.py
import structlog
from typing import Optional

from morph_adapter.core.domain.exceptions import DomainError, InvalidLookupError
from morph_adapter.core.domain.models import Homonym
from morph_adapter.core.ports.morphology_service import IMorphologyService

logger = structlog.get_logger()

class LookupHomonym:
    """
    Use Case: Resolves a surface word into its Homonym graph.

    Responsibilities:
    1. Validates the lookup request.
    2. Delegates fetch and transform to the Morphology Service Port.
    3. Logs the outcome of the lookup.
    """

    def __init__(self, service: IMorphologyService):
        self.service = service

    async def execute(self, lang_code: str, word: str) -> Optional[Homonym]:
        """
        Args:
            lang_code: ISO 639-3 code (e.g., 'lat', 'grc').
            word: The surface form to analyze.

        Returns:
            The Homonym, or None if the service knows no analysis for the word.
        """
        self._validate(lang_code, word)
        word = word.strip()

        logger.info("lookup_started", lang=lang_code, word=word)
        try:
            homonym = await self.service.get_homonym(lang_code, word)
        except DomainError as e:
            logger.warning("lookup_rejected", lang=lang_code, word=word, error=e.message)
            raise
        except Exception as e:
            # Network and parse failures reach the caller unchanged
            logger.error("lookup_failed", lang=lang_code, word=word, error=str(e), exc_info=True)
            raise

        if homonym is None:
            logger.info("lookup_empty", lang=lang_code, word=word)
            return None

        logger.info("lookup_success", lang=lang_code, **homonym.summary())
        return homonym

    def _validate(self, lang_code: str, word: str) -> None:
        if not lang_code:
            raise InvalidLookupError("a language code is required.")
        if not word or not word.strip():
            raise InvalidLookupError("a non-empty word is required.")
