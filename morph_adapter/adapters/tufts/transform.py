# morph_adapter\adapters\tufts\transform.py
"""
Tufts Annotation JSON -> Homonym.

The service wraps every analysis in an RDF Annotation:

    RDF.Annotation
        creator.Agent.about      engine identity
        rights.$                 rights statement
        Body                     one object or a list of them
            rest.entry
                dict             headword data (object or list, may be absent)
                infl             inflections (object or list)
                mean             short definitions (object or list)

Leaf values are wrapped as {"$": value, "order": n}. A list of leaves in
place of one leaf is a multi-valued feature.
"""

import structlog
from typing import Any, Callable, Dict, List, Optional, Tuple

from morph_adapter.adapters.tufts.import_data import ImportData
from morph_adapter.core.domain.exceptions import (
    LanguageNotSupportedError,
    MalformedResponseError,
    UnsupportedFeatureTypeError,
)
from morph_adapter.core.domain.features import FeatureKind
from morph_adapter.core.domain.models import (
    Definition,
    Feature,
    Homonym,
    Inflection,
    Lemma,
    Lexeme,
    Meaning,
    ResourceProvider,
)

logger = structlog.get_logger()

MappingResolver = Callable[[str], Optional[ImportData]]

DEFAULT_DEFINITION_LANG = "eng"

# (json key, feature kind) read from a dict entry
DICT_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("pofs", FeatureKind.PART),
    ("case", FeatureKind.CASE),
    ("gend", FeatureKind.GENDER),
    ("decl", FeatureKind.DECLENSION),
    ("conj", FeatureKind.CONJUGATION),
    ("area", FeatureKind.AREA),
    ("age", FeatureKind.AGE),
    ("geo", FeatureKind.GEO),
    ("freq", FeatureKind.FREQUENCY),
    ("note", FeatureKind.NOTE),
    ("pron", FeatureKind.PRONUNCIATION),
    ("src", FeatureKind.SOURCE),
    ("kind", FeatureKind.KIND),
)

# (json key, feature kind) read from an infl entry
INFL_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("pofs", FeatureKind.PART),
    ("case", FeatureKind.CASE),
    ("decl", FeatureKind.DECLENSION),
    ("num", FeatureKind.NUMBER),
    ("gend", FeatureKind.GENDER),
    ("conj", FeatureKind.CONJUGATION),
    ("tense", FeatureKind.TENSE),
    ("voice", FeatureKind.VOICE),
    ("mood", FeatureKind.MOOD),
    ("pers", FeatureKind.PERSON),
    ("comp", FeatureKind.COMPARISON),
    ("dial", FeatureKind.DIALECT),
    ("stemtype", FeatureKind.STEMTYPE),
    ("derivtype", FeatureKind.DERIVTYPE),
    ("morph", FeatureKind.MORPH),
)

# Inflection features that fill in a lemma lacking them
BACKFILL_KINDS: Tuple[str, ...] = (
    FeatureKind.PART,
    FeatureKind.DECLENSION,
    FeatureKind.CONJUGATION,
)


def _as_list(node: Any) -> List[Any]:
    if node is None:
        return []
    if isinstance(node, list):
        return node
    return [node]


def _leaf_text(node: Any) -> Optional[str]:
    """Text of a single {"$": ...} leaf, stripped; None when empty."""
    if isinstance(node, dict):
        node = node.get("$")
    if node is None:
        return None
    text = str(node).strip()
    return text or None


def _leaves(node: Any) -> List[Tuple[str, int]]:
    """(value, sort order) of every non-empty leaf under a field."""
    leaves = []
    for item in _as_list(node):
        text = _leaf_text(item)
        if text is None:
            continue
        order = item.get("order", 1) if isinstance(item, dict) else 1
        leaves.append((text, order if isinstance(order, int) else 1))
    return leaves


class TuftsTransformer:
    """
    Converts one Tufts response into a Homonym.

    `resolve_mapping` returns the mapping table configured for a language
    code, or None if the language is not configured.
    """

    def __init__(self, resolve_mapping: MappingResolver, allow_unknown_values: bool = True):
        self.resolve_mapping = resolve_mapping
        self.allow_unknown_values = allow_unknown_values

    def transform(self, json_obj: Dict[str, Any], target_word: Optional[str] = None) -> Optional[Homonym]:
        """
        Returns None when the response carries no analysis.

        Raises:
            MalformedResponseError: the RDF envelope or an entry is missing or
                is not an object.
            LanguageNotSupportedError: a headword language has no mapping table.
            UnknownFeatureValueError: a value cannot be mapped.
        """
        rdf = json_obj.get("RDF") if isinstance(json_obj, dict) else None
        annotation = rdf.get("Annotation") if isinstance(rdf, dict) else None
        if not isinstance(annotation, dict):
            raise MalformedResponseError("response has no RDF.Annotation")

        bodies = _as_list(annotation.get("Body"))
        if not bodies:
            logger.info("morph_no_analysis", word=target_word)
            return None

        provider = self._provider(annotation)

        lexemes: List[Lexeme] = []
        for body in bodies:
            rest = body.get("rest") if isinstance(body, dict) else None
            entry = rest.get("entry") if isinstance(rest, dict) else None
            if not isinstance(entry, dict):
                raise MalformedResponseError("annotation body has no rest.entry")
            lexemes.extend(self._entry_lexemes(entry, provider))

        if not lexemes:
            logger.warning("morph_no_lexemes", word=target_word, bodies=len(bodies))
            return None

        logger.debug("morph_transformed", word=target_word, lexemes=len(lexemes))
        return Homonym(lexemes=lexemes, target_word=target_word)

    # --- Envelope ---

    def _provider(self, annotation: Dict[str, Any]) -> Optional[ResourceProvider]:
        creator = annotation.get("creator")
        agent = creator.get("Agent") if isinstance(creator, dict) else None
        uri = agent.get("about") if isinstance(agent, dict) else None
        if not uri:
            return None
        return ResourceProvider(uri=uri, rights=_leaf_text(annotation.get("rights")) or "")

    # --- Entries ---

    def _entry_lexemes(self, entry: Dict[str, Any], provider: Optional[ResourceProvider]) -> List[Lexeme]:
        dicts = _as_list(entry.get("dict"))
        infls = _as_list(entry.get("infl"))
        means = _as_list(entry.get("mean"))

        if not dicts:
            dicts = [self._dict_from_inflection(infls)]

        lexemes = []
        for index, dict_json in enumerate(dicts):
            if not isinstance(dict_json, dict):
                raise MalformedResponseError("dict entry is not an object")
            hdwd = dict_json.get("hdwd") or {}
            if not isinstance(hdwd, dict):
                raise MalformedResponseError("dict entry has a malformed hdwd")
            lang = hdwd.get("lang")
            data = self.resolve_mapping(lang) if lang else None
            if data is None:
                raise LanguageNotSupportedError(lang or "")

            lemma = data.parse_lemma(_leaf_text(hdwd) or "")
            if lemma is None:
                logger.warning("morph_lemma_skipped", headword=hdwd.get("$"), lang=lang)
                continue

            for key, kind in DICT_FIELDS:
                self._apply(lemma, data, kind, dict_json.get(key))

            inflections = [self._inflection(infl_json, lemma, data) for infl_json in infls]

            if len(dicts) == 1:
                entry_means = means
            else:
                entry_means = means[index:index + 1]

            lexemes.append(Lexeme(
                lemma=lemma,
                inflections=inflections,
                meaning=self._meaning(entry_means, lemma),
                provider=provider,
            ))
        return lexemes

    def _dict_from_inflection(self, infls: List[Any]) -> Dict[str, Any]:
        """A stand-in dict entry whose headword is the first inflection's form."""
        term = infls[0].get("term") if infls and isinstance(infls[0], dict) else None
        if not isinstance(term, dict):
            raise MalformedResponseError("entry has neither a dict nor an inflection term")
        word = (_leaf_text(term.get("stem")) or "") + (_leaf_text(term.get("suff")) or "")
        return {"hdwd": {"lang": term.get("lang"), "$": word}}

    def _inflection(self, infl_json: Dict[str, Any], lemma: Lemma, data: ImportData) -> Inflection:
        if not isinstance(infl_json, dict):
            raise MalformedResponseError("infl entry is not an object")
        term = infl_json.get("term")
        if not isinstance(term, dict):
            term = {}
        stem = _leaf_text(term.get("stem")) or ""
        suffix = _leaf_text(term.get("suff"))
        if not stem and not suffix:
            raise MalformedResponseError("inflection has neither a stem nor a suffix")

        inflection = Inflection(
            language=data.language_code,
            stem=stem,
            suffix=suffix,
            prefix=_leaf_text(term.get("pref")),
            example=_leaf_text(infl_json.get("xmpl")),
        )

        for key, kind in INFL_FIELDS:
            features = self._apply(inflection, data, kind, infl_json.get(key))
            # First inflection to supply a value wins
            if features and kind in BACKFILL_KINDS and not lemma.has_feature(kind):
                lemma.add_feature(features)

        return inflection

    def _meaning(self, means: List[Any], lemma: Lemma) -> Meaning:
        meaning = Meaning()
        for mean in means:
            text = _leaf_text(mean)
            if text is None:
                continue
            lang = (mean.get("lang") if isinstance(mean, dict) else None) or DEFAULT_DEFINITION_LANG
            meaning.append_short_defs(Definition(
                text=text, language=lang, format="text/plain", lemma_text=lemma.word,
            ))
        return meaning

    # --- Features ---

    def _apply(self, carrier, data: ImportData, kind: str, node: Any) -> List[Feature]:
        """Maps every leaf under `node` and sets the result on `carrier`."""
        features: List[Feature] = []
        for value, order in _leaves(node):
            mapped = self._map_value(data, kind, value, order)
            if isinstance(mapped, Feature):
                features.append(mapped)
            else:
                features.extend(mapped)

        if features:
            carrier.add_feature(features)
        return features

    def _map_value(self, data: ImportData, kind: str, value: str, order: int):
        if kind in data:
            return data[kind].get(value, order, self.allow_unknown_values)

        # The language has no registry for this kind (e.g. declension in Arabic)
        if self.allow_unknown_values:
            return Feature(value=value, type=kind, language=data.language_code, sort_order=order)
        raise UnsupportedFeatureTypeError(kind, data.language_code)
