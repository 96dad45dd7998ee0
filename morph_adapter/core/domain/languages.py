"""
morph_adapter/core/domain/languages.py

Per-language registries of grammatical feature types.

Each LanguageModel owns one FeatureType per feature kind it supports. The
ordered values of a FeatureType are the canonical values a mapping table may
produce for that language; free-form kinds are registered as unrestricted.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Type

from morph_adapter.core.domain import features as F
from morph_adapter.core.domain.features import FeatureKind
from morph_adapter.core.domain.models import FeatureType

DIR_LTR = "ltr"
DIR_RTL = "rtl"

# Kinds every language accepts verbatim from the provider.
UNRESTRICTED_KINDS: Tuple[str, ...] = (
    FeatureKind.AREA,
    FeatureKind.GEO,
    FeatureKind.AGE,
    FeatureKind.SOURCE,
    FeatureKind.NOTE,
    FeatureKind.PRONUNCIATION,
    FeatureKind.DIALECT,
    FeatureKind.STEMTYPE,
    FeatureKind.DERIVTYPE,
    FeatureKind.MORPH,
    FeatureKind.KIND,
    FeatureKind.FOOTNOTE,
    FeatureKind.WORD,
    FeatureKind.MEANING,
)

PARTS_OF_SPEECH = [
    F.POFS_ADJECTIVE, F.POFS_ADVERB, F.POFS_ADVERBIAL, F.POFS_ARTICLE,
    F.POFS_CONJUNCTION, F.POFS_EXCLAMATION, F.POFS_INTERJECTION, F.POFS_NOUN,
    F.POFS_NUMERAL, F.POFS_PARTICLE, F.POFS_PREFIX, F.POFS_PREPOSITION,
    F.POFS_PRONOUN, F.POFS_SUFFIX, F.POFS_SUPINE, F.POFS_VERB,
    F.POFS_VERB_PARTICIPLE,
]

ORDINALS_3 = [F.ORD_1ST, F.ORD_2ND, F.ORD_3RD]


class LanguageModel:
    """
    Base class for language-specific feature registries.

    Subclasses set `code` / `codes` and extend `_initialize_features()`.
    """

    name: str = "unknown"
    code: str = ""
    codes: Tuple[str, ...] = ()
    direction: str = DIR_LTR

    def __init__(self) -> None:
        self.features: Dict[str, FeatureType] = self._initialize_features()

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LanguageModel) and other.code == self.code

    def __hash__(self) -> int:
        return hash(self.code)

    @classmethod
    def supports_language(cls, code: str) -> bool:
        return code in cls.codes

    def to_code(self) -> str:
        return self.code

    def _feature(self, kind: str, values) -> FeatureType:
        return FeatureType(kind, values, self.code)

    def _initialize_features(self) -> Dict[str, FeatureType]:
        registry = {
            kind: FeatureType(kind, [], self.code, unrestricted=True)
            for kind in UNRESTRICTED_KINDS
        }
        registry[FeatureKind.PART] = self._feature(FeatureKind.PART, PARTS_OF_SPEECH)
        return registry


class LatinLanguageModel(LanguageModel):
    name = "latin"
    code = "lat"
    codes = ("la", "lat")

    def _initialize_features(self) -> Dict[str, FeatureType]:
        registry = super()._initialize_features()
        registry.update({
            FeatureKind.NUMBER: self._feature(FeatureKind.NUMBER, [F.NUM_SINGULAR, F.NUM_PLURAL]),
            FeatureKind.CASE: self._feature(FeatureKind.CASE, [
                F.CASE_NOMINATIVE, F.CASE_GENITIVE, F.CASE_DATIVE, F.CASE_ACCUSATIVE,
                F.CASE_ABLATIVE, F.CASE_LOCATIVE, F.CASE_VOCATIVE,
            ]),
            FeatureKind.DECLENSION: self._feature(
                FeatureKind.DECLENSION, [F.ORD_1ST, F.ORD_2ND, F.ORD_3RD, F.ORD_4TH, F.ORD_5TH]
            ),
            FeatureKind.GENDER: self._feature(
                FeatureKind.GENDER, [F.GEND_MASCULINE, F.GEND_FEMININE, F.GEND_NEUTER]
            ),
            FeatureKind.TYPE: self._feature(FeatureKind.TYPE, [F.TYPE_REGULAR, F.TYPE_IRREGULAR]),
            FeatureKind.TENSE: self._feature(FeatureKind.TENSE, [
                F.TENSE_PRESENT, F.TENSE_IMPERFECT, F.TENSE_FUTURE, F.TENSE_PERFECT,
                F.TENSE_PLUPERFECT, F.TENSE_FUTURE_PERFECT,
            ]),
            FeatureKind.VOICE: self._feature(FeatureKind.VOICE, [F.VOICE_PASSIVE, F.VOICE_ACTIVE]),
            FeatureKind.MOOD: self._feature(FeatureKind.MOOD, [
                F.MOOD_INDICATIVE, F.MOOD_SUBJUNCTIVE, F.MOOD_IMPERATIVE, F.MOOD_INFINITIVE,
                F.MOOD_PARTICIPLE, F.MOOD_GERUNDIVE, F.MOOD_SUPINE,
            ]),
            FeatureKind.PERSON: self._feature(FeatureKind.PERSON, ORDINALS_3),
            FeatureKind.CONJUGATION: self._feature(
                FeatureKind.CONJUGATION, [F.ORD_1ST, F.ORD_2ND, F.ORD_3RD, F.ORD_4TH, F.TYPE_IRREGULAR]
            ),
            FeatureKind.COMPARISON: self._feature(
                FeatureKind.COMPARISON, [F.COMP_POSITIVE, F.COMP_COMPARATIVE, F.COMP_SUPERLATIVE]
            ),
            FeatureKind.FREQUENCY: self._feature(FeatureKind.FREQUENCY, [
                "very rare", "rare", "uncommon", "common", "lesser", "frequent",
                "very frequent", "inflection",
            ]),
        })
        return registry


class GreekLanguageModel(LanguageModel):
    name = "greek"
    code = "grc"
    codes = ("grc",)

    def _initialize_features(self) -> Dict[str, FeatureType]:
        registry = super()._initialize_features()
        registry.update({
            FeatureKind.NUMBER: self._feature(
                FeatureKind.NUMBER, [F.NUM_SINGULAR, F.NUM_PLURAL, F.NUM_DUAL]
            ),
            FeatureKind.CASE: self._feature(FeatureKind.CASE, [
                F.CASE_NOMINATIVE, F.CASE_GENITIVE, F.CASE_DATIVE, F.CASE_ACCUSATIVE,
                F.CASE_VOCATIVE,
            ]),
            FeatureKind.DECLENSION: self._feature(FeatureKind.DECLENSION, ORDINALS_3),
            FeatureKind.GENDER: self._feature(
                FeatureKind.GENDER, [F.GEND_MASCULINE, F.GEND_FEMININE, F.GEND_NEUTER]
            ),
            FeatureKind.TENSE: self._feature(FeatureKind.TENSE, [
                F.TENSE_PRESENT, F.TENSE_IMPERFECT, F.TENSE_FUTURE, F.TENSE_PERFECT,
                F.TENSE_PLUPERFECT, F.TENSE_FUTURE_PERFECT, F.TENSE_AORIST,
            ]),
            FeatureKind.VOICE: self._feature(FeatureKind.VOICE, [
                F.VOICE_PASSIVE, F.VOICE_ACTIVE, F.VOICE_MEDIOPASSIVE, F.VOICE_MIDDLE,
            ]),
            FeatureKind.MOOD: self._feature(FeatureKind.MOOD, [
                F.MOOD_INDICATIVE, F.MOOD_SUBJUNCTIVE, F.MOOD_OPTATIVE, F.MOOD_IMPERATIVE,
                F.MOOD_INFINITIVE, F.MOOD_PARTICIPLE,
            ]),
            FeatureKind.PERSON: self._feature(FeatureKind.PERSON, ORDINALS_3),
            FeatureKind.COMPARISON: self._feature(
                FeatureKind.COMPARISON, [F.COMP_POSITIVE, F.COMP_COMPARATIVE, F.COMP_SUPERLATIVE]
            ),
            FeatureKind.FREQUENCY: FeatureType(FeatureKind.FREQUENCY, [], self.code, unrestricted=True),
        })
        return registry


class ArabicLanguageModel(LanguageModel):
    name = "arabic"
    code = "ara"
    codes = ("ar", "ara", "arb")
    direction = DIR_RTL

    def _initialize_features(self) -> Dict[str, FeatureType]:
        registry = super()._initialize_features()
        registry.update({
            FeatureKind.NUMBER: self._feature(
                FeatureKind.NUMBER, [F.NUM_SINGULAR, F.NUM_DUAL, F.NUM_PLURAL]
            ),
            FeatureKind.CASE: self._feature(
                FeatureKind.CASE, [F.CASE_NOMINATIVE, F.CASE_GENITIVE, F.CASE_ACCUSATIVE]
            ),
            FeatureKind.GENDER: self._feature(FeatureKind.GENDER, [F.GEND_MASCULINE, F.GEND_FEMININE]),
            FeatureKind.TENSE: self._feature(
                FeatureKind.TENSE, [F.TENSE_PERFECT, F.TENSE_IMPERFECT, F.TENSE_FUTURE]
            ),
            FeatureKind.VOICE: self._feature(FeatureKind.VOICE, [F.VOICE_ACTIVE, F.VOICE_PASSIVE]),
            FeatureKind.MOOD: self._feature(FeatureKind.MOOD, [
                F.MOOD_INDICATIVE, F.MOOD_SUBJUNCTIVE, F.MOOD_IMPERATIVE, "jussive",
            ]),
            FeatureKind.PERSON: self._feature(FeatureKind.PERSON, ORDINALS_3),
        })
        return registry


class PersianLanguageModel(LanguageModel):
    name = "persian"
    code = "per"
    codes = ("per", "fas", "fa")
    direction = DIR_RTL

    def _initialize_features(self) -> Dict[str, FeatureType]:
        registry = super()._initialize_features()
        registry.update({
            FeatureKind.NUMBER: self._feature(FeatureKind.NUMBER, [F.NUM_SINGULAR, F.NUM_PLURAL]),
            FeatureKind.PERSON: self._feature(FeatureKind.PERSON, ORDINALS_3),
        })
        return registry


LANGUAGE_MODELS: Tuple[Type[LanguageModel], ...] = (
    LatinLanguageModel,
    GreekLanguageModel,
    ArabicLanguageModel,
    PersianLanguageModel,
)


def get_language_model(code: str) -> Optional[Type[LanguageModel]]:
    """Return the LanguageModel class supporting an ISO code, if any."""
    for model in LANGUAGE_MODELS:
        if model.supports_language(code):
            return model
    return None
