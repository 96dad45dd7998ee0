"""Buckwalter Aramorph (engine id `aramorph`) mapping table for Arabic."""

from morph_adapter.adapters.tufts.import_data import ImportData
from morph_adapter.core.domain import features as F
from morph_adapter.core.domain.features import FeatureKind
from morph_adapter.core.domain.languages import ArabicLanguageModel

ENGINE_ID = "aramorph"


def build() -> ImportData:
    data = ImportData(ArabicLanguageModel(), ENGINE_ID)

    data.add_feature(FeatureKind.PART).map(
        "proper noun", [data.canonical(FeatureKind.PART, F.POFS_NOUN)]
    )
    data.add_feature(FeatureKind.GENDER).map("masculine feminine", [
        data.canonical(FeatureKind.GENDER, F.GEND_MASCULINE),
        data.canonical(FeatureKind.GENDER, F.GEND_FEMININE),
    ])

    return data.freeze()


data = build()
