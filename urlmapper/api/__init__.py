"""API module for urlmapper.

Functions defined here are the single source of truth for the CLI commands and
for host integrations that call the rewrite bindings directly.
"""

__all__ = []
