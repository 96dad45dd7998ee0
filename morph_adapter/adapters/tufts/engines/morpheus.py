"""Morpheus (engine id `morpheusgrc`) mapping table for Ancient Greek."""

from morph_adapter.adapters.tufts.import_data import ImportData
from morph_adapter.core.domain import features as F
from morph_adapter.core.domain.features import FeatureKind
from morph_adapter.core.domain.languages import GreekLanguageModel

ENGINE_ID = "morpheusgrc"


def build() -> ImportData:
    data = ImportData(GreekLanguageModel(), ENGINE_ID)

    data.add_feature(FeatureKind.GENDER).map("masculine feminine", [
        data.canonical(FeatureKind.GENDER, F.GEND_MASCULINE),
        data.canonical(FeatureKind.GENDER, F.GEND_FEMININE),
    ])

    data.add_feature(FeatureKind.DECLENSION).map("1st & 2nd", [
        data.canonical(FeatureKind.DECLENSION, F.ORD_1ST),
        data.canonical(FeatureKind.DECLENSION, F.ORD_2ND),
    ])

    return data.freeze()


data = build()
