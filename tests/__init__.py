# tests\__init__.py
"""
Test Suite for the morphology adapter.

Organization:
- `core`: Tests for the data model, language registries and use cases with mocked dependencies.
- `adapters`: Tests for the Tufts client, its mapping tables and the response transform.
- `data`: Hand-written service responses for cases the recorded fixtures do not cover.
"""
