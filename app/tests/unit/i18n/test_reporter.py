"""Tests for translations.i18n.reporter module."""

from unittest.mock import patch

import pytest

from translations.i18n.models import MissingKeyInfo
from translations.i18n.reporter import MissingKeyReporter


@pytest.fixture
def mock_logger():
    with patch("translations.i18n.reporter.logger") as mock_logger:
        yield mock_logger


class TestMissingKeyReporter:
    """Tests for MissingKeyReporter."""

    def test_missing_key_warning(self, mock_logger):
        MissingKeyReporter()(MissingKeyInfo("common", "missing"))

        mock_logger.warning.assert_called_once()
        call = mock_logger.warning.call_args
        assert call.args[0] == "missing_translation_key"
        assert call.kwargs["namespace"] == "common"
        assert call.kwargs["i18n_key"] == "missing"
        assert 'Try adding "missing" to the namespace "common"' in call.kwargs["message"]

    def test_key_without_namespace_warning(self, mock_logger):
        MissingKeyReporter()(MissingKeyInfo("greeting"))

        mock_logger.warning.assert_called_once()
        call = mock_logger.warning.call_args
        assert call.args[0] == "translation_key_without_namespace"
        assert call.kwargs["text"] == "greeting"

    def test_silent_in_production(self, mock_logger):
        reporter = MissingKeyReporter(is_production=True)
        reporter(MissingKeyInfo("common", "missing"))
        reporter(MissingKeyInfo("greeting"))

        mock_logger.warning.assert_not_called()
