"""
morph_adapter/adapters/tufts/import_data.py

Mapping tables from a morphology engine's vocabulary to canonical features.

There is one ImportData per (language, engine) pair. It holds a
FeatureMapping for every feature kind the language supports, so values that
need no translation resolve to themselves, and engine modules only declare
the tokens that differ from the canonical values.

Tables are built once at import time and frozen afterwards.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple, Union

from morph_adapter.core.domain.exceptions import (
    UnknownFeatureValueError,
    UnsupportedFeatureTypeError,
)
from morph_adapter.core.domain.languages import LanguageModel
from morph_adapter.core.domain.models import Feature, FeatureData, FeatureType, Lemma

LemmaParser = Callable[[str, str], Optional[Lemma]]
"""(headword text, language code) -> Lemma, or None to skip the entry."""

MappedValue = Union[Feature, Tuple[Feature, ...]]


class FrozenTableError(RuntimeError):
    """Raised when a frozen mapping table is modified."""


class FeatureMapping:
    """
    Provider value -> canonical value(s) for one feature kind of one language.
    """

    def __init__(self, feature_type: FeatureType):
        self.feature_type = feature_type
        self._importer: Dict[str, MappedValue] = {}
        self._frozen = False

    def __repr__(self) -> str:
        return f"FeatureMapping({self.feature_type.kind!r}, {self.feature_type.language!r}, {len(self._importer)} entries)"

    def map(self, provider_value: str, library_value: FeatureData) -> "FeatureMapping":
        """
        Sets the canonical value(s) for a provider token. A sequence maps
        the token to a group of values. Chainable.
        """
        if self._frozen:
            raise FrozenTableError(f"Mapping for '{self.feature_type.kind}' is frozen.")
        if not provider_value:
            raise ValueError("Imported value should not be empty.")
        if not library_value:
            raise ValueError("Library value should not be empty.")

        if isinstance(library_value, Feature):
            self._importer[provider_value] = library_value
        else:
            self._importer[provider_value] = tuple(library_value)
        return self

    def has(self, provider_value: str) -> bool:
        return provider_value in self._importer

    def get(
        self,
        provider_value: str,
        sort_order: int = 1,
        allow_unknown: bool = False,
    ) -> FeatureData:
        """
        Resolves a provider value, in this order:

        1. an explicit mapping (a group yields a list of Features);
        2. a canonical value of the feature type, or any value if the
           type is unrestricted;
        3. any value, when `allow_unknown` is set.

        Raises:
            UnknownFeatureValueError: none of the above applies.
        """
        if self.has(provider_value):
            mapped = self._importer[provider_value]
            if isinstance(mapped, Feature):
                return self.feature_type.get(mapped.value, sort_order)
            return [self.feature_type.get(f.value, sort_order) for f in mapped]

        if self.feature_type.has_value(provider_value) or self.feature_type.unrestricted:
            return self.feature_type.get(provider_value, sort_order)

        if allow_unknown and provider_value:
            return self.feature_type.get(provider_value, sort_order)

        raise UnknownFeatureValueError(
            provider_value, self.feature_type.kind, self.feature_type.language
        )

    def freeze(self) -> None:
        self._frozen = True


class ImportData:
    """
    The complete mapping table of one engine for one language.

    Usage:

        data = ImportData(LatinLanguageModel(), "whitakerLat")
        data.add_feature(FeatureKind.GENDER).map(
            "common", [data.canonical(FeatureKind.GENDER, "masculine"),
                       data.canonical(FeatureKind.GENDER, "feminine")]
        )
        data.freeze()

        data[FeatureKind.GENDER].get("common")  # -> [masculine, feminine]
    """

    def __init__(self, language: LanguageModel, engine: str):
        self.language = language
        self.engine = engine
        self._mappings: Dict[str, FeatureMapping] = {}
        self._lemma_parser: Optional[LemmaParser] = None
        self._frozen = False

        # Every supported kind starts with an empty mapping so that
        # canonical values resolve without an explicit entry
        for kind in language.features:
            self.add_feature(kind)

    def __repr__(self) -> str:
        return f"ImportData(language={self.language_code!r}, engine={self.engine!r})"

    @property
    def language_code(self) -> str:
        return self.language.to_code()

    def add_feature(self, kind: str) -> FeatureMapping:
        """Creates (or replaces) the mapping for a feature kind and returns it."""
        if self._frozen:
            raise FrozenTableError(f"Import data for engine '{self.engine}' is frozen.")
        feature_type = self.language.features.get(kind)
        if feature_type is None:
            raise UnsupportedFeatureTypeError(kind, self.language_code)
        mapping = FeatureMapping(feature_type)
        self._mappings[kind] = mapping
        return mapping

    def __getitem__(self, kind: str) -> FeatureMapping:
        try:
            return self._mappings[kind]
        except KeyError:
            raise UnsupportedFeatureTypeError(kind, self.language_code) from None

    def __contains__(self, kind: object) -> bool:
        return kind in self._mappings

    def canonical(self, kind: str, value: str) -> Feature:
        """The language's canonical Feature for a value; KeyError if not stored."""
        return self.language.features[kind][value]

    def set_lemma_parser(self, parser: LemmaParser) -> None:
        """Installs an engine-specific headword parser."""
        if self._frozen:
            raise FrozenTableError(f"Import data for engine '{self.engine}' is frozen.")
        self._lemma_parser = parser

    def parse_lemma(self, text: str) -> Optional[Lemma]:
        if self._lemma_parser is not None:
            return self._lemma_parser(text, self.language_code)
        text = (text or "").strip()
        if not text:
            return None
        return Lemma(word=text, language=self.language_code)

    def freeze(self) -> "ImportData":
        for mapping in self._mappings.values():
            mapping.freeze()
        self._frozen = True
        return self
