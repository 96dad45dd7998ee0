"""
morph_adapter/core/domain/features.py

The shared vocabulary of the data model: grammatical feature kinds and the
canonical values that mapping tables translate provider tokens into.
"""

from typing import FrozenSet


class FeatureKind:
    """
    Names of the grammatical feature types supported by the data model.

    Values may contain spaces ("part of speech"); they are used verbatim as
    keys in `Lemma.features` and `Inflection.features`.
    """

    WORD = "word"
    PART = "part of speech"
    NUMBER = "number"
    CASE = "case"
    DECLENSION = "declension"
    GENDER = "gender"
    TYPE = "type"
    CONJUGATION = "conjugation"
    COMPARISON = "comparison"
    TENSE = "tense"
    VOICE = "voice"
    MOOD = "mood"
    PERSON = "person"
    FREQUENCY = "frequency"
    MEANING = "meaning"
    SOURCE = "source"
    FOOTNOTE = "footnote"
    DIALECT = "dialect"
    NOTE = "note"
    PRONUNCIATION = "pronunciation"
    AREA = "area"
    GEO = "geo"
    AGE = "age"
    KIND = "kind"
    STEMTYPE = "stemtype"
    DERIVTYPE = "derivtype"
    MORPH = "morph"

    ALL: FrozenSet[str] = frozenset(
        {
            WORD, PART, NUMBER, CASE, DECLENSION, GENDER, TYPE, CONJUGATION,
            COMPARISON, TENSE, VOICE, MOOD, PERSON, FREQUENCY, MEANING, SOURCE,
            FOOTNOTE, DIALECT, NOTE, PRONUNCIATION, AREA, GEO, AGE, KIND,
            STEMTYPE, DERIVTYPE, MORPH,
        }
    )

    @classmethod
    def is_allowed(cls, name: str) -> bool:
        return name in cls.ALL


# --- Canonical Values ---

# Part of speech
POFS_ADJECTIVE = "adjective"
POFS_ADVERB = "adverb"
POFS_ADVERBIAL = "adverbial"
POFS_ARTICLE = "article"
POFS_CONJUNCTION = "conjunction"
POFS_EXCLAMATION = "exclamation"
POFS_INTERJECTION = "interjection"
POFS_NOUN = "noun"
POFS_NUMERAL = "numeral"
POFS_PARTICLE = "particle"
POFS_PREFIX = "prefix"
POFS_PREPOSITION = "preposition"
POFS_PRONOUN = "pronoun"
POFS_SUFFIX = "suffix"
POFS_SUPINE = "supine"
POFS_VERB = "verb"
POFS_VERB_PARTICIPLE = "verb participle"

# Ordinals (declension, conjugation, person)
ORD_1ST = "1st"
ORD_2ND = "2nd"
ORD_3RD = "3rd"
ORD_4TH = "4th"
ORD_5TH = "5th"

# Number
NUM_SINGULAR = "singular"
NUM_DUAL = "dual"
NUM_PLURAL = "plural"

# Case
CASE_NOMINATIVE = "nominative"
CASE_GENITIVE = "genitive"
CASE_DATIVE = "dative"
CASE_ACCUSATIVE = "accusative"
CASE_ABLATIVE = "ablative"
CASE_LOCATIVE = "locative"
CASE_VOCATIVE = "vocative"

# Gender
GEND_MASCULINE = "masculine"
GEND_FEMININE = "feminine"
GEND_NEUTER = "neuter"

# Tense
TENSE_PRESENT = "present"
TENSE_IMPERFECT = "imperfect"
TENSE_FUTURE = "future"
TENSE_PERFECT = "perfect"
TENSE_PLUPERFECT = "pluperfect"
TENSE_FUTURE_PERFECT = "future perfect"
TENSE_AORIST = "aorist"

# Voice
VOICE_ACTIVE = "active"
VOICE_PASSIVE = "passive"
VOICE_MIDDLE = "middle"
VOICE_MEDIOPASSIVE = "mediopassive"

# Mood
MOOD_INDICATIVE = "indicative"
MOOD_SUBJUNCTIVE = "subjunctive"
MOOD_OPTATIVE = "optative"
MOOD_IMPERATIVE = "imperative"
MOOD_INFINITIVE = "infinitive"
MOOD_PARTICIPLE = "participle"
MOOD_GERUNDIVE = "gerundive"
MOOD_SUPINE = "supine"

# Comparison
COMP_POSITIVE = "positive"
COMP_COMPARATIVE = "comparative"
COMP_SUPERLATIVE = "superlative"

# Type
TYPE_REGULAR = "regular"
TYPE_IRREGULAR = "irregular"
