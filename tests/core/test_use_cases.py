# tests\core\test_use_cases.py
import httpx
import pytest

from morph_adapter.core.domain.exceptions import InvalidLookupError, LanguageNotSupportedError

@pytest.mark.asyncio
class TestLookupHomonym:

    async def test_execute_success(self, container, mock_morphology_service, sample_homonym):
        """
        Scenario: The service knows the word.
        Expected: The use case returns the Homonym and calls the service once.
        """
        # Arrange
        use_case = container.lookup_homonym_use_case()
        mock_morphology_service.get_homonym.return_value = sample_homonym

        # Act
        result = await use_case.execute("lat", "mare")

        # Assert
        assert result is sample_homonym
        mock_morphology_service.get_homonym.assert_called_once_with("lat", "mare")

    async def test_execute_strips_word(self, container, mock_morphology_service):
        use_case = container.lookup_homonym_use_case()

        await use_case.execute("lat", "  mare ")

        mock_morphology_service.get_homonym.assert_called_once_with("lat", "mare")

    async def test_execute_no_analysis(self, container, mock_morphology_service):
        """
        Scenario: The service has no analysis for the word.
        Expected: None, not an error.
        """
        use_case = container.lookup_homonym_use_case()
        mock_morphology_service.get_homonym.return_value = None

        assert await use_case.execute("lat", "xyzzy") is None

    @pytest.mark.parametrize("lang, word", [("", "mare"), ("lat", ""), ("lat", "   ")])
    async def test_execute_invalid_request(self, container, mock_morphology_service, lang, word):
        """
        Scenario: Language or word is missing.
        Expected: Raises InvalidLookupError before the service is called.
        """
        use_case = container.lookup_homonym_use_case()

        with pytest.raises(InvalidLookupError):
            await use_case.execute(lang, word)

        mock_morphology_service.get_homonym.assert_not_called()

    async def test_execute_domain_error_propagates(self, container, mock_morphology_service):
        use_case = container.lookup_homonym_use_case()
        mock_morphology_service.get_homonym.side_effect = LanguageNotSupportedError("xyz")

        with pytest.raises(LanguageNotSupportedError):
            await use_case.execute("xyz", "mare")

    async def test_execute_network_error_propagates_unchanged(self, container, mock_morphology_service):
        """
        Scenario: The service is unreachable.
        Expected: The httpx error reaches the caller as is (no retry, no wrapping).
        """
        use_case = container.lookup_homonym_use_case()
        mock_morphology_service.get_homonym.side_effect = httpx.ConnectError("Network Down")

        with pytest.raises(httpx.ConnectError):
            await use_case.execute("lat", "mare")

        assert mock_morphology_service.get_homonym.call_count == 1
