"""
Unit Tests for Logging Configuration

Tests the pairwise id filter and handler setup.
"""

import json
import logging
import os
from unittest.mock import patch

import pytest

from pairwise_keys import config
from pairwise_keys.logging_config import CustomJsonFormatter, PairwiseIdFilter, setup_logging


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger("pairwise_keys")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def _record(**extra):
    record = logging.LogRecord("pairwise_keys.test", logging.INFO, __file__, 1, "message", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestPairwiseIdFilter:

    def test_adds_default_pairwise_id(self):
        record = _record()
        assert PairwiseIdFilter().filter(record)
        assert record.pairwise_id == "-"

    def test_keeps_existing_pairwise_id(self):
        record = _record(pairwise_id="did:example:123-peer1")
        PairwiseIdFilter().filter(record)
        assert record.pairwise_id == "did:example:123-peer1"


class TestSetupLogging:

    def test_json_format(self, restore_package_logger):
        with patch.object(config, "settings", config.Settings(_env_file=None, log_format="json", log_level="DEBUG")):
            setup_logging()

        handlers = restore_package_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, CustomJsonFormatter)
        assert restore_package_logger.level == logging.DEBUG

    def test_json_output_fields(self, restore_package_logger):
        with patch.object(config, "settings", config.Settings(_env_file=None, app_version="9.9.9")):
            formatter = CustomJsonFormatter(fmt='%(level)s %(name)s %(pairwise_id)s %(message)s')
            record = _record(pairwise_id="did:example:123-peer1")
            payload = json.loads(formatter.format(record))

        assert payload["pairwise_id"] == "did:example:123-peer1"
        assert payload["service"] == "pairwise-keys"
        assert payload["version"] == "9.9.9"
        assert payload["level"] == "INFO"
        assert "timestamp" in payload

    def test_text_format(self, restore_package_logger):
        with patch.object(config, "settings", config.Settings(_env_file=None, log_format="text")):
            setup_logging()

        formatter = restore_package_logger.handlers[0].formatter
        assert not isinstance(formatter, CustomJsonFormatter)
        assert "%(pairwise_id)s" in formatter._fmt

    def test_setup_replaces_handlers(self, restore_package_logger):
        with patch.object(config, "settings", config.Settings(_env_file=None)):
            setup_logging()
            setup_logging()
        assert len(restore_package_logger.handlers) == 1

    def test_records_not_duplicated_by_root_handlers(self, restore_package_logger):
        """Package records stay on the package handler once it is configured."""
        with patch.object(config, "settings", config.Settings(_env_file=None)):
            setup_logging()
        assert restore_package_logger.propagate is False
