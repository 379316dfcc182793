"""Detect configured prefixes that overlap."""

from collections.abc import Sequence

from .MappingOverlap import MappingOverlap
from .MappingRecord import MappingRecord


def find_overlapping_mappings(mappings: Sequence[MappingRecord]) -> list[MappingOverlap]:
    """Report every pair of mappings where one local prefix starts with the other.

    Mappings apply in registration order and the first match wins at any
    position, so an earlier short prefix hides a later longer one
    (``shadowed``). An earlier long prefix followed by a shorter one is the
    intended way to special-case a subfolder (``nested``).
    """
    overlaps: list[MappingOverlap] = []
    for index, first in enumerate(mappings):
        for second in mappings[index + 1 :]:
            if first.local_prefix == second.local_prefix:
                kind = "duplicate"
            elif second.local_prefix.startswith(first.local_prefix):
                kind = "shadowed"
            elif first.local_prefix.startswith(second.local_prefix):
                kind = "nested"
            else:
                continue
            overlaps.append(MappingOverlap(first=first, second=second, kind=kind))
    return overlaps
