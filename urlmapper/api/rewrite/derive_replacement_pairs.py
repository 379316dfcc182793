"""Expand mapping records into literal replacement pairs."""

from collections.abc import Sequence

from ..mapping.MappingRecord import MappingRecord
from .ReplacementPair import ReplacementPair


def derive_replacement_pairs(mappings: Sequence[MappingRecord], root_urls: Sequence[str]) -> list[ReplacementPair]:
    """Derive the ordered search/replace pairs for ``mappings``.

    For every mapping, in order:

    1. one absolute pair per root URL variant (``https://site/`` + prefix),
    2. the prefix itself, for host-less paths such as ``/wp-content/...``,
    3. the prefix without its leading slash, for paths stored relative.

    Args:
        mappings: Effective mapping records in priority order.
        root_urls: Site root URLs in every scheme the site answers on.

    Returns:
        Pairs in application order; empty when there are no mappings.
    """
    if not mappings:
        return []

    roots = list(dict.fromkeys(root.rstrip("/") for root in root_urls if root))

    pairs: list[ReplacementPair] = []
    for mapping in mappings:
        local_prefix = mapping.local_prefix
        remote_base = mapping.remote_base

        for root in roots:
            pairs.append(ReplacementPair(search=root + local_prefix, replace=remote_base))

        pairs.append(ReplacementPair(search=local_prefix, replace=remote_base))

        relative = local_prefix.lstrip("/")
        if relative and relative != local_prefix:
            pairs.append(ReplacementPair(search=relative, replace=remote_base))

    return pairs
