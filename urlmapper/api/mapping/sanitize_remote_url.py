"""Sanitize and validate a remote base URL."""

import re

from pydantic import HttpUrl, TypeAdapter, ValidationError

# Characters allowed to survive in a URL; everything else is dropped.
_DISALLOWED = re.compile(r"[^a-z0-9\-~+_.?#=!&;,/:%@$|*'()\[\]\x80-\U0010ffff]", re.IGNORECASE)
_HTTP_URL = TypeAdapter(HttpUrl)


def sanitize_remote_url(url: str) -> str:
    """Return a cleaned-up ``url``, or ``""`` when it is not a usable http(s) URL.

    Spaces are percent-encoded and characters that cannot appear in a URL are
    removed. A bare host name (``cdn.example.com/bucket``) gets ``http://``
    prepended. The cleaned string is returned as typed, it is only validated
    (scheme http or https, non-empty host), never re-normalized.
    """
    url = str(url).strip()
    if url == "":
        return ""

    url = _DISALLOWED.sub("", url.replace(" ", "%20"))
    if url == "":
        return ""

    if ":" not in url and url[0] not in "/#?":
        url = "http://" + url

    try:
        parsed = _HTTP_URL.validate_python(url)
    except ValidationError:
        return ""
    if not parsed.host:
        return ""
    return url
