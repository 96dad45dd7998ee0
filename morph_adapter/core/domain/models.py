# morph_adapter\core\domain\models.py
"""
The grammatical data model.

Hierarchical structure of a morphological analysis:

    Homonym (all readings of one surface form)
        Lexeme 1
            Lemma (headword, principal parts, lemma-level features)
            Inflection 1 (stem, suffix, inflection-level features)
            Inflection 2
            Meaning (short definitions)
            ResourceProvider (who produced the analysis)
        Lexeme 2
            ...
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from morph_adapter.core.domain.exceptions import (
    DomainError,
    InvalidFeatureError,
    UnsupportedFeatureTypeError,
)
from morph_adapter.core.domain.features import FeatureKind

# --- Value Objects ---

class Feature(BaseModel):
    """
    A typed grammatical attribute value, e.g. case=nominative.
    Equality is structural: two features with the same value, type,
    language and sort order are interchangeable.
    """
    model_config = ConfigDict(frozen=True)

    value: str
    type: str
    language: str
    sort_order: int = 1

    @field_validator("value", "language")
    @classmethod
    def _not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Feature should have a non-empty value and language.")
        return v

    @field_validator("type")
    @classmethod
    def _allowed_type(cls, v: str) -> str:
        if not FeatureKind.is_allowed(v):
            raise ValueError(f'Features of "{v}" type are not supported.')
        return v

    def has_value(self, value: str) -> bool:
        return self.value == value


FeatureData = Union[Feature, Sequence[Feature]]


class FeatureType:
    """
    Definition of one grammatical feature kind for one language.

    Stores the allowed values in their sort order. Values that share a sort
    position are given as a nested group, e.g.
    ["nominative", ["genitive", "dative"], "accusative"].

    An unrestricted type accepts any value (used for free-form kinds such as
    dialect or source).
    """

    def __init__(
        self,
        kind: str,
        values: Sequence[Union[str, Sequence[str]]],
        language: str,
        unrestricted: bool = False,
    ):
        if not FeatureKind.is_allowed(kind):
            raise UnsupportedFeatureTypeError(kind, language)
        if not language:
            raise ValueError("FeatureType requires a language")

        self.kind = kind
        self.language = language
        self.unrestricted = unrestricted
        self._order_index: List[Union[str, List[str]]] = []
        self._order_lookup: Dict[str, int] = {}

        for index, value in enumerate(values):
            if isinstance(value, str):
                self._order_index.append(value)
                self._order_lookup[value] = index
            else:
                group = list(value)
                self._order_index.append(group)
                for element in group:
                    self._order_lookup[element] = index

    def __repr__(self) -> str:
        return f"FeatureType(kind={self.kind!r}, language={self.language!r})"

    def has_value(self, value: str) -> bool:
        return value in self._order_lookup

    def get(self, value: str, sort_order: int = 1) -> Feature:
        """
        Return a Feature with an arbitrary value. The value does not need
        to be among the stored values of this type.
        """
        if not value:
            raise ValueError("A non-empty value should be provided.")
        return Feature(value=value, type=self.kind, language=self.language, sort_order=sort_order)

    def __getitem__(self, value: str) -> Feature:
        """Return the canonical Feature for a stored value."""
        if not self.has_value(value):
            raise KeyError(value)
        return self.get(value)

    @property
    def ordered_values(self) -> List[Union[str, List[str]]]:
        return [list(v) if isinstance(v, list) else v for v in self._order_index]

    def set_order(self, values: Sequence[FeatureData]) -> None:
        """
        Redefine the sort order of the stored values. Grouped features
        (a nested sequence) share the same sort position.
        """
        if not values:
            raise ValueError("A non-empty list of values should be provided.")

        for value in values:
            group = [value] if isinstance(value, Feature) else list(value)
            for element in group:
                if not self.has_value(element.value):
                    raise ValueError(
                        f'Trying to order an element with "{element.value}" value '
                        f'that is not stored in a "{self.kind}" type.'
                    )
                if element.type != self.kind:
                    raise ValueError(
                        f'Trying to order an element with type "{element.type}" '
                        f'that is different from "{self.kind}".'
                    )
                if element.language != self.language:
                    raise ValueError(
                        f'Trying to order an element with language "{element.language}" '
                        f'that is different from "{self.language}".'
                    )

        self._order_index = []
        self._order_lookup = {}
        for index, value in enumerate(values):
            if isinstance(value, Feature):
                self._order_index.append(value.value)
                self._order_lookup[value.value] = index
            else:
                group = [element.value for element in value]
                self._order_index.append(group)
                for element in group:
                    self._order_lookup[element] = index

# --- Entities ---

class FeatureCarrier(BaseModel):
    """Common behaviour of objects annotated with grammatical features."""

    language: str
    features: Dict[str, List[Feature]] = Field(default_factory=dict)

    @field_validator("language")
    @classmethod
    def _language_required(cls, v: str) -> str:
        if not v:
            raise ValueError("Language should not be empty.")
        return v

    def add_feature(self, data: FeatureData) -> None:
        """
        Sets a grammatical feature. Multi-valued features are given as a
        list and replace whatever was stored for that kind before.
        """
        items = [data] if isinstance(data, Feature) else list(data or [])
        if not items:
            raise InvalidFeatureError("feature data cannot be empty.")

        kind = items[0].type if isinstance(items[0], Feature) else None
        for element in items:
            if not isinstance(element, Feature):
                raise InvalidFeatureError("feature data must be Feature objects.")
            if element.type != kind:
                raise InvalidFeatureError(
                    f"features of type '{element.type}' and '{kind}' cannot be set together."
                )
            if element.language != self.language:
                raise InvalidFeatureError(
                    f"language '{element.language}' of a feature does not match "
                    f"language '{self.language}' of {type(self).__name__}."
                )

        self.features[kind] = items

    def has_feature(self, kind: str) -> bool:
        return bool(self.features.get(kind))

    def feature_values(self, kind: str) -> List[str]:
        return [f.value for f in self.features.get(kind, [])]


class Lemma(FeatureCarrier):
    """A canonical dictionary headword."""
    word: str
    principal_parts: List[str] = Field(default_factory=list)

    @field_validator("word")
    @classmethod
    def _word_required(cls, v: str) -> str:
        if not v:
            raise ValueError("Word should not be empty.")
        return v


class Inflection(FeatureCarrier):
    """One inflected form (stem + suffix) with its grammatical features."""
    stem: str = ""
    suffix: Optional[str] = None
    prefix: Optional[str] = None
    example: Optional[str] = None

    @model_validator(mode="after")
    def _form_required(self) -> "Inflection":
        if not self.stem and not self.suffix:
            raise ValueError("Inflection needs a stem or a suffix.")
        return self

    @property
    def form(self) -> str:
        return f"{self.prefix or ''}{self.stem}{self.suffix or ''}"

    def has_feature_value(self, kind: str, value: str) -> bool:
        return any(f.has_value(value) for f in self.features.get(kind, []))


class Definition(BaseModel):
    text: str
    language: str
    format: str = "text/plain"
    lemma_text: Optional[str] = None


class Meaning(BaseModel):
    short_defs: List[Definition] = Field(default_factory=list)
    full_defs: List[Definition] = Field(default_factory=list)

    def append_short_defs(self, definitions: Union[Definition, Sequence[Definition], None]) -> None:
        if definitions is None:
            return
        if isinstance(definitions, Definition):
            definitions = [definitions]
        self.short_defs.extend(d for d in definitions if d is not None)

    def is_empty(self) -> bool:
        return not self.short_defs and not self.full_defs


class ResourceProvider(BaseModel):
    """Provenance of an analysis: the engine identity and its rights statement."""
    model_config = ConfigDict(frozen=True)

    uri: str
    rights: str = ""

    def __str__(self) -> str:
        return self.rights


class Lexeme(BaseModel):
    """A lemma plus its inflections, meaning and provenance."""
    lemma: Lemma
    inflections: List[Inflection] = Field(default_factory=list)
    meaning: Meaning = Field(default_factory=Meaning)
    provider: Optional[ResourceProvider] = None


class Homonym(BaseModel):
    """All lexical readings that share one surface form."""
    lexemes: List[Lexeme]
    target_word: Optional[str] = None

    @property
    def language(self) -> str:
        """
        Language of the first lexeme's lemma. All lemmas within a homonym
        are assumed to share a language.
        """
        if self.lexemes:
            return self.lexemes[0].lemma.language
        raise DomainError(
            "Homonym has not been initialized properly. Unable to obtain language information."
        )

    def find(self, word: str) -> List[Lexeme]:
        """Lexemes whose lemma word equals `word`."""
        return [lexeme for lexeme in self.lexemes if lexeme.lemma.word == word]

    def summary(self) -> Dict[str, Any]:
        return {
            "target_word": self.target_word,
            "lexemes": [lexeme.lemma.word for lexeme in self.lexemes],
        }
