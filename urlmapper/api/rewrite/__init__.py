"""Rewrite engine: pair derivation, substitution and host bindings."""

from .deep_replace import DEFAULT_MAX_DEPTH, deep_replace
from .derive_replacement_pairs import derive_replacement_pairs
from .replace_in_string import replace_in_string
from .ReplacementPair import ReplacementPair
from .URLRewriter import URLRewriter
from .ValueKind import ValueKind

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ReplacementPair",
    "URLRewriter",
    "ValueKind",
    "deep_replace",
    "derive_replacement_pairs",
    "replace_in_string",
]
