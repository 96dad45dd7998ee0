# morph_adapter\core\domain\__init__.py
"""
Domain Entities and Value Objects.

This package defines the grammatical data model produced by every
morphology adapter (Feature, Lemma, Inflection, Lexeme, Homonym) together
with the per-language feature registries. These models are devoid of any
infrastructure logic.
"""
