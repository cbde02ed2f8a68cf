#!/usr/bin/env python3
"""
Pytest fixtures for contact cleaner tests
"""

import configparser
import json
from unittest.mock import Mock

import pytest

from contact_cleaner.core import ContactCleaner
from contact_cleaner.path_resolver import PathDependencyResolver
from contact_cleaner.rule_engine import RuleEngine
from tests.helpers import TEST_NOW


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing."""
    logger = Mock()
    logger.info = Mock()
    logger.debug = Mock()
    logger.warning = Mock()
    logger.error = Mock()
    return logger


@pytest.fixture
def test_config():
    """ConfigParser with the default [Cleaner] settings."""
    config = configparser.ConfigParser()
    config.add_section('Cleaner')
    config.set('Cleaner', 'stale_after_days', '10')
    config.set('Cleaner', 'prefix_length', '2')
    config.set('Cleaner', 'timezone', 'UTC')
    return config


@pytest.fixture
def mock_cleaner(mock_logger, test_config):
    """Lightweight stand-in for ContactCleaner: just logger and config."""
    cleaner = Mock()
    cleaner.logger = mock_logger
    cleaner.config = test_config
    return cleaner


@pytest.fixture
def rule_engine(mock_cleaner):
    return RuleEngine(mock_cleaner)


@pytest.fixture
def path_resolver(mock_cleaner):
    return PathDependencyResolver(mock_cleaner)


@pytest.fixture
def now():
    return TEST_NOW


@pytest.fixture
def config_file(tmp_path):
    """config.ini in a temp dir with exports written beside it and no disclaimer prompt."""
    path = tmp_path / "config.ini"
    path.write_text(
        "[Cleaner]\n"
        "stale_after_days = 10\n"
        "prefix_length = 2\n"
        "timezone = UTC\n"
        "\n"
        "[Export]\n"
        "output_dir = exports\n"
        "suffix = _cleaned.json\n"
        "require_disclaimer = true\n"
        "\n"
        "[Logging]\n"
        "log_level = DEBUG\n"
        "colored_output = false\n"
        "log_file =\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def cleaner(config_file):
    """Real ContactCleaner reading the temp config."""
    return ContactCleaner(config_file=str(config_file))


@pytest.fixture
def write_export_file(tmp_path):
    """Write a {"contacts": [...]} document and return its path."""
    def _write(raw_contacts, name="contacts.json"):
        path = tmp_path / name
        path.write_text(json.dumps({'contacts': raw_contacts}), encoding="utf-8")
        return path
    return _write
