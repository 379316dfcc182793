"""Canonicalize a local folder prefix."""


def normalize_local_prefix(local: str) -> str:
    """Normalize a local path prefix to ``/segment/.../``.

    Whitespace is trimmed, then the prefix gets exactly one leading and one
    trailing slash. Empty input stays empty so callers can drop the entry.

    Examples:
        >>> normalize_local_prefix("wp-content/uploads/2023")
        '/wp-content/uploads/2023/'
        >>> normalize_local_prefix("//wp-content/uploads//")
        '/wp-content/uploads/'
        >>> normalize_local_prefix("   ")
        ''
    """
    local = str(local).strip()
    if local == "":
        return local
    trimmed = local.strip("/")
    if trimmed == "":
        return "/"
    return f"/{trimmed}/"
