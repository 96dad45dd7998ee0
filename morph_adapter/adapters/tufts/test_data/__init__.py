"""
Canned Tufts responses for offline lookups (`--test-data` in the CLI).
"""

import json
from pathlib import Path
from typing import Any, Dict

from morph_adapter.core.domain.exceptions import WordNotInTestDataError

DATA_DIR = Path(__file__).parent


class WordTestData:
    """Maps a surface word to its recorded service response."""

    FILES: Dict[str, str] = {
        "cupidinibus": "cupidinibus.json",
        "mare": "mare.json",
        "cepit": "cepit.json",
        "φιλόσοφος": "philosophos.json",
    }

    def get(self, word: str) -> Dict[str, Any]:
        filename = self.FILES.get(word)
        if filename is None:
            raise WordNotInTestDataError(word)
        with open(DATA_DIR / filename, "r", encoding="utf-8") as f:
            return json.load(f)
