"""Settings for the in-memory options store."""

from pydantic import BaseModel


class _Data(BaseModel):
    """No settings: mappings and metadata live in the process-wide mongomock client
    and vanish when it exits. Used by tests and dry runs."""
