"""Hazm (engine id `hazm`) mapping table for Persian."""

from morph_adapter.adapters.tufts.import_data import ImportData
from morph_adapter.core.domain import features as F
from morph_adapter.core.domain.features import FeatureKind
from morph_adapter.core.domain.languages import PersianLanguageModel

ENGINE_ID = "hazm"


def build() -> ImportData:
    data = ImportData(PersianLanguageModel(), ENGINE_ID)
    data.add_feature(FeatureKind.PART).map(
        "proper noun", [data.canonical(FeatureKind.PART, F.POFS_NOUN)]
    )
    return data.freeze()


data = build()
