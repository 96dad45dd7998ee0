# morph_adapter/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Feature Mapping Errors ---

class UnknownFeatureValueError(DomainError):
    """Raised when a provider value has no mapping, is not canonical and unknown values are not allowed."""
    def __init__(self, value: str, feature_type: str, language: str):
        self.value = value
        self.feature_type = feature_type
        self.language = language
        super().__init__(
            f"Skipping an unknown value '{value}' of a grammatical feature "
            f"'{feature_type}' of {language} language."
        )

class UnsupportedFeatureTypeError(DomainError):
    """Raised when a feature kind is not defined for a language or for the data model."""
    def __init__(self, feature_type: str, language: str = ""):
        suffix = f" for language '{language}'" if language else ""
        super().__init__(f"Features of '{feature_type}' type are not supported{suffix}.")

class InvalidFeatureError(DomainError):
    """Raised when feature data cannot be attached to a Lemma or an Inflection."""
    def __init__(self, reason: str):
        super().__init__(f"Invalid feature data: {reason}")

# --- Lookup Errors ---

class LanguageNotSupportedError(DomainError):
    """Raised when a response or request refers to a language with no configured engine."""
    def __init__(self, lang_code: str):
        self.lang_code = lang_code
        super().__init__(f"Language '{lang_code}' is not supported or not configured for any engine.")

class InvalidLookupError(DomainError):
    """Raised when a lookup request is missing its language or word."""
    def __init__(self, reason: str):
        super().__init__(f"Invalid lookup request: {reason}")

class RequestUrlError(DomainError):
    """Raised when no request URL can be prepared for a language."""
    def __init__(self, lang_code: str):
        super().__init__(f"Unable to prepare parser request url for {lang_code}")

# --- Response Errors ---

class MalformedResponseError(DomainError):
    """Raised when a service response does not have the expected annotation structure."""
    def __init__(self, reason: str):
        super().__init__(f"Malformed morphology response: {reason}")

class WordNotInTestDataError(DomainError):
    """Raised when a word is requested from the canned test data but is not there."""
    def __init__(self, word: str):
        self.word = word
        super().__init__(f'Word "{word}" does not exist in test data')
