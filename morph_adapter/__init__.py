# morph_adapter\__init__.py
"""
Morphology Service Client Adapter.

Queries a remote morphological-analysis service for ancient languages
(Latin, Greek, Arabic, Persian) and converts its annotation JSON into the
normalized Homonym -> Lexeme -> Lemma/Inflection graph.

The package follows Hexagonal Architecture (Ports & Adapters):
- `core`: the linguistic data model, ports and use cases.
- `adapters`: the concrete service clients and their mapping tables.
- `shared`: configuration, logging and dependency wiring.
"""

__version__ = "1.0.0"
