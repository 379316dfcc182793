"""Metadata rows and the read-time rewrite path."""

from .MetaReader import MetaReader
from .MetaRow import MetaRow
from .MetaStore import MetaStore

__all__ = ["MetaReader", "MetaRow", "MetaStore"]
