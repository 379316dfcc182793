"""Literal multi-pair substitution over a single string."""

import re
from collections.abc import Sequence
from functools import lru_cache
from typing import Any

from .ReplacementPair import ReplacementPair


@lru_cache(maxsize=32)
def _compile(pairs: tuple[ReplacementPair, ...]) -> tuple[re.Pattern[str], dict[str, str]]:
    replacements: dict[str, str] = {}
    # Remote bases are listed first, longest first, and map to themselves so
    # text that already points at remote storage is consumed unchanged even
    # when one base is a prefix of another.
    for base in sorted({pair.replace for pair in pairs}, key=len, reverse=True):
        replacements[base] = base
    for pair in pairs:
        if pair.search:
            replacements.setdefault(pair.search, pair.replace)
    pattern = re.compile("|".join(re.escape(literal) for literal in replacements))
    return pattern, replacements


def replace_in_string(value: Any, pairs: Sequence[ReplacementPair]) -> Any:
    """Replace every occurrence of every pair's search literal in ``value``.

    The string is scanned once, left to right. At each position the
    first-listed pair whose search text starts there wins, and its
    replacement is emitted without being scanned again. Occurrences of a
    pair's replacement base are skipped over as they are, which makes the
    rewrite idempotent: running it on its own output changes nothing.

    Earlier pairs take priority, so a short prefix registered before a longer
    one hides the longer one wherever both match (see
    ``find_overlapping_mappings``).

    Non-string and empty values are returned unchanged, as is everything when
    ``pairs`` is empty.
    """
    if not isinstance(value, str) or value == "" or not pairs:
        return value

    pattern, replacements = _compile(tuple(pairs))
    return pattern.sub(lambda match: replacements[match.group(0)], value)
