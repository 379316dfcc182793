"""Named filter chains the host runs values through."""

import itertools
from collections.abc import Callable
from typing import Any


class HookRegistry:
    """Ordered filter callbacks keyed by extension-point name.

    Callbacks run by ascending priority, then registration order. Each one
    receives the previous callback's return value plus up to
    ``accepted_args - 1`` of the extra arguments given to ``apply_filters``.
    """

    def __init__(self):
        self._filters: dict[str, list[tuple[int, int, Callable[..., Any], int]]] = {}
        self._sequence = itertools.count()

    def add_filter(self, name: str, callback: Callable[..., Any], priority: int = 10, accepted_args: int = 1) -> None:
        if accepted_args < 1:
            raise ValueError(f"accepted_args must be at least 1 (found: {accepted_args})")
        self._filters.setdefault(name, []).append((priority, next(self._sequence), callback, accepted_args))

    def remove_filter(self, name: str, callback: Callable[..., Any]) -> bool:
        entries = self._filters.get(name, [])
        kept = [entry for entry in entries if entry[2] != callback]
        self._filters[name] = kept
        return len(kept) != len(entries)

    def has_filter(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        for _priority, _sequence, callback, accepted_args in sorted(
            self._filters.get(name, []), key=lambda entry: (entry[0], entry[1])
        ):
            value = callback(value, *args[: accepted_args - 1])
        return value
