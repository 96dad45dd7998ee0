# morph_adapter\core\ports\morphology_service.py
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from morph_adapter.core.domain.models import Homonym


class IMorphologyService(ABC):
    """
    Port for a remote morphological analysis service.
    Implementations translate the provider's response vocabulary into the
    domain Homonym graph.
    """

    @abstractmethod
    def prepare_request_url(self, lang_code: str, word: str) -> Optional[str]:
        """
        Builds the lookup URL for a word.

        Returns:
            The URL, or None if the language is not served by this service.
        """
        ...

    @abstractmethod
    async def fetch(self, lang_code: str, word: str) -> Dict[str, Any]:
        """Retrieves the raw analysis for a word as parsed JSON."""
        ...

    @abstractmethod
    def transform(self, json_obj: Dict[str, Any], target_word: Optional[str] = None) -> Optional[Homonym]:
        """Maps a raw analysis into a Homonym."""
        ...

    @abstractmethod
    async def get_homonym(self, lang_code: str, word: str) -> Optional[Homonym]:
        """
        Fetches and transforms the analysis for a word.

        Returns:
            The Homonym, or None if the service has no analysis for the word.
        """
        ...
