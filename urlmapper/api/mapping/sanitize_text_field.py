"""Plain-text sanitization for administrator input."""

import re

_TAGS = re.compile(r"<[^>]*>")
_CONTROL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_WHITESPACE = re.compile(r"[\r\n\t ]+")


def sanitize_text_field(value: str) -> str:
    """Strip tags and control characters, collapse whitespace runs, and trim."""
    value = _TAGS.sub("", str(value))
    value = _CONTROL.sub("", value)
    return _WHITESPACE.sub(" ", value).strip()
