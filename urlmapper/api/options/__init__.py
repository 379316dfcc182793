"""Option store: the host's persisted key/value configuration."""

from .Options import Options

__all__ = ["Options"]
