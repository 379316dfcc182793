"""Recursive rewriting of nested value trees."""

import copy
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .replace_in_string import replace_in_string
from .ReplacementPair import ReplacementPair
from .ValueKind import ValueKind

DEFAULT_MAX_DEPTH = 10

_Handler = Callable[[Any, Sequence[ReplacementPair], int, int], Any]


def deep_replace(
    value: Any,
    pairs: Sequence[ReplacementPair],
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Any:
    """Apply ``replace_in_string`` to every string leaf of ``value``.

    Sequences and records are rebuilt, never mutated in place. Each level of
    nesting adds one to ``depth``; once it exceeds ``max_depth`` the remaining
    subtree is returned untouched, which also bounds self-referencing
    structures.
    """
    if depth > max_depth or not pairs:
        return value
    return _HANDLERS[ValueKind.of(value)](value, pairs, depth, max_depth)


def _replace_string(value: str, pairs: Sequence[ReplacementPair], depth: int, max_depth: int) -> str:
    return replace_in_string(value, pairs)


def _replace_sequence(value: list | tuple, pairs: Sequence[ReplacementPair], depth: int, max_depth: int) -> Any:
    items = [deep_replace(item, pairs, depth + 1, max_depth) for item in value]
    if isinstance(value, list):
        rebuilt = copy.copy(value)
        rebuilt[:] = items
        return rebuilt
    if hasattr(value, "_make"):  # namedtuple
        return value._make(items)
    return tuple(items) if type(value) is tuple else type(value)(items)


def _replace_record(value: Any, pairs: Sequence[ReplacementPair], depth: int, max_depth: int) -> Any:
    if isinstance(value, Mapping):
        rebuilt = copy.copy(value) if isinstance(value, dict) else dict(value)
        for key, item in value.items():
            rebuilt[key] = deep_replace(item, pairs, depth + 1, max_depth)
        return rebuilt

    try:
        rebuilt = copy.copy(value)
    except (TypeError, copy.Error):
        # Uncopyable host objects such as open file handles pass through.
        return value
    rebuilt.__dict__.update(
        {name: deep_replace(item, pairs, depth + 1, max_depth) for name, item in vars(value).items()}
    )
    return rebuilt


def _keep(value: Any, pairs: Sequence[ReplacementPair], depth: int, max_depth: int) -> Any:
    return value


# Exactly one handler per ValueKind member.
_HANDLERS: dict[ValueKind, _Handler] = {
    ValueKind.STRING: _replace_string,
    ValueKind.SEQUENCE: _replace_sequence,
    ValueKind.RECORD: _replace_record,
    ValueKind.OTHER: _keep,
}
if set(_HANDLERS) != set(ValueKind):
    raise RuntimeError("deep_replace has no handler for some ValueKind members")
