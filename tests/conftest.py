# tests\conftest.py
import json
import pytest
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

from morph_adapter.shared.container import Container
from morph_adapter.adapters.tufts.adapter import TuftsAdapter
from morph_adapter.adapters.tufts.test_data import WordTestData
from morph_adapter.core.domain.models import Homonym, Lemma, Lexeme
from morph_adapter.core.ports.morphology_service import IMorphologyService

DATA_DIR = Path(__file__).parent / "data"

@pytest.fixture(scope="function")
def mock_morphology_service():
    """Returns a mock implementation of the Morphology Service."""
    service = MagicMock(spec=IMorphologyService)
    # Async methods must be mocked with AsyncMock
    service.get_homonym = AsyncMock(return_value=None)
    service.fetch = AsyncMock(return_value={})
    return service

@pytest.fixture(scope="function")
def container(mock_morphology_service):
    """
    Sets up the Dependency Injection Container for testing.
    It overrides the real service client with the mock defined above.
    """
    container = Container()
    container.morphology_service.override(mock_morphology_service)

    yield container

    container.morphology_service.reset_override()

@pytest.fixture
def adapter():
    """A Tufts adapter on the bundled default config."""
    return TuftsAdapter()

@pytest.fixture
def recorded():
    """Loads a recorded service response by word."""
    return WordTestData().get

@pytest.fixture
def fixture_json():
    """Loads a hand-written response from tests/data."""
    def _load(name: str):
        with open(DATA_DIR / f"{name}.json", "r", encoding="utf-8") as f:
            return json.load(f)
    return _load

@pytest.fixture
def sample_homonym():
    """Provides a minimal one-lexeme Homonym."""
    lemma = Lemma(word="mare", language="lat")
    return Homonym(lexemes=[Lexeme(lemma=lemma)], target_word="mare")
