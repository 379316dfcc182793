"""Canonical form of metadata key names."""

import re

_DISALLOWED = re.compile(r"[^a-z0-9_\-]")


def sanitize_key(key: str) -> str:
    """Lowercase ``key`` and strip everything but ``a-z``, ``0-9``, ``_`` and ``-``."""
    return _DISALLOWED.sub("", str(key).lower())
