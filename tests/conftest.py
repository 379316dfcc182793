"""Shared pytest configuration and fixtures for all tests."""

import json
import uuid
from pathlib import Path

import pytest

from urlmapper.api.config.URLMapperConfig import URLMapperConfig
from urlmapper.api.database.DatabaseConfig import DatabaseConfig
from urlmapper.api.mapping.MappingStore import MappingStore
from urlmapper.api.options.Options import Options

SITE_URL = "https://site.example"

_MARKERS = ("unit", "config", "database", "mapping", "rewrite", "hooks", "meta", "cli")


def pytest_configure(config):
    for marker in _MARKERS:
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def unique_prefix() -> str:
    """Database name unique to one test; the mongomock client is shared per process."""
    return f"urlmapper_test_{uuid.uuid4().hex[:12]}"


def minimal_config_dict() -> dict:
    """Minimal valid urlmapper configuration dict for testing."""
    return {
        "site": {
            "home_url": SITE_URL,
        },
        "database": {
            "type": "mongomock",
            "prefix": unique_prefix(),
            "data": {},
        },
    }


def database_config() -> DatabaseConfig:
    return DatabaseConfig(**minimal_config_dict()["database"])


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a fresh minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def urlmapper_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up URLMAPPER_HOME with a minimal config file.

    Returns:
        Path to the urlmapper home directory (tmp_path)
    """
    monkeypatch.setenv("URLMAPPER_HOME", str(tmp_path))
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(minimal_config_dict))
    return tmp_path


@pytest.fixture
def config(urlmapper_home: Path) -> URLMapperConfig:
    """The configuration written by ``urlmapper_home``."""
    return URLMapperConfig.load()


@pytest.fixture
def store() -> MappingStore:
    """A mapping store on an empty, test-private database."""
    return MappingStore(Options(database_config()))


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
