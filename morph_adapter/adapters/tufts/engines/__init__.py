"""
Engine mapping tables, keyed by the engine id used in the adapter config.
"""

from typing import Dict

from morph_adapter.adapters.tufts.import_data import ImportData
from morph_adapter.adapters.tufts.engines import aramorph, hazm, morpheus, whitaker

ENGINES: Dict[str, ImportData] = {
    whitaker.ENGINE_ID: whitaker.data,
    morpheus.ENGINE_ID: morpheus.data,
    aramorph.ENGINE_ID: aramorph.data,
    hazm.ENGINE_ID: hazm.data,
}


__all__ = ["ENGINES"]
