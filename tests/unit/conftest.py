"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

import pytest

from tests.conftest import SITE_URL, database_config, minimal_config_dict, run_cmd
from urlmapper.api.config.SiteConfig import SiteConfig
from urlmapper.api.mapping.MappingRecord import MappingRecord

__all__ = [
    "SITE_URL",
    "database_config",
    "minimal_config_dict",
    "record",
    "run_cmd",
]


def record(local_prefix: str, remote_base: str) -> MappingRecord:
    """Shorthand for an already-normalized mapping record."""
    return MappingRecord(local_prefix=local_prefix, remote_base=remote_base)


@pytest.fixture
def site() -> SiteConfig:
    return SiteConfig(home_url=SITE_URL)
