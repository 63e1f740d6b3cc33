"""
Unit Test Fixtures.

Unit tests exercise one component at a time with plain values; no CLI
runner and no HTTP client.
"""

import pytest

from curlite.cli.formatters import get_syntax_theme
from curlite.core.config import get_app_config


@pytest.fixture
def clear_config_cache():
    """Clear cached configuration and theme before and after a test."""
    get_app_config.cache_clear()
    get_syntax_theme.cache_clear()
    yield
    get_app_config.cache_clear()
    get_syntax_theme.cache_clear()
