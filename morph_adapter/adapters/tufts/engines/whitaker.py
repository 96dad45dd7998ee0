"""
Whitaker's Words (engine id `whitakerLat`) mapping table for Latin.

Whitaker reports collective genders as a single token and spells the
future perfect with an underscore. Its headwords carry the principal parts
("sumo, sumere, sumsi, sumtus"), which the lemma parser splits apart.
"""

from typing import Optional

from morph_adapter.adapters.tufts.import_data import ImportData
from morph_adapter.core.domain import features as F
from morph_adapter.core.domain.features import FeatureKind
from morph_adapter.core.domain.languages import LatinLanguageModel
from morph_adapter.core.domain.models import Lemma

ENGINE_ID = "whitakerLat"


def parse_whitaker_lemma(text: str, language_code: str) -> Optional[Lemma]:
    """
    Builds a Lemma from a Whitaker headword.

    Each comma-separated segment is cut down to its first token, so
    "cap io" yields "cap". The first segment gives the lemma word; when it
    is empty the headword is rejected. All non-empty parts are kept as
    principal parts.
    """
    segments = [segment.split() for segment in (text or "").split(",")]
    if not segments[0]:
        return None

    parts = [tokens[0] for tokens in segments if tokens]
    return Lemma(word=parts[0], language=language_code, principal_parts=parts)


def build() -> ImportData:
    data = ImportData(LatinLanguageModel(), ENGINE_ID)

    masc = data.canonical(FeatureKind.GENDER, F.GEND_MASCULINE)
    fem = data.canonical(FeatureKind.GENDER, F.GEND_FEMININE)
    neut = data.canonical(FeatureKind.GENDER, F.GEND_NEUTER)
    data.add_feature(FeatureKind.GENDER) \
        .map("common", [masc, fem]) \
        .map("all", [masc, fem, neut])

    data.add_feature(FeatureKind.TENSE) \
        .map("future_perfect", data.canonical(FeatureKind.TENSE, F.TENSE_FUTURE_PERFECT))

    data.set_lemma_parser(parse_whitaker_lemma)
    return data.freeze()


data = build()
