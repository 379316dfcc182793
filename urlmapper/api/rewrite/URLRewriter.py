"""Rewrite bindings the host calls at output time."""

import logging
from typing import Any

from ..config.SiteConfig import SiteConfig
from ..mapping.MappingStore import MappingStore
from ..mapping.sanitize_key import sanitize_key
from ..meta.MetaStore import MetaStore
from .deep_replace import DEFAULT_MAX_DEPTH, deep_replace
from .derive_replacement_pairs import derive_replacement_pairs
from .replace_in_string import replace_in_string
from .ReplacementPair import ReplacementPair

logger = logging.getLogger(__name__)


class URLRewriter:
    """Map local upload URLs to remote storage in values handed out by the host.

    Replacement pairs are derived from the store on every call, so an
    administrator's save is visible to the very next rewrite. Nothing is
    written back; only the returned values change.

    Args:
        store: Source of mapping records and the meta-key whitelist.
        site: Root URLs the local paths are served under.
        meta_store: Raw metadata access for reads the host has not resolved yet.
        max_depth: Nesting limit for structured metadata values.
    """

    def __init__(
        self,
        store: MappingStore,
        site: SiteConfig,
        meta_store: MetaStore | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.store = store
        self.site = site
        self.meta_store = meta_store
        self.max_depth = max_depth

    def replacement_pairs(self) -> list[ReplacementPair]:
        return derive_replacement_pairs(self.store.load().mappings, self.site.root_urls())

    def rewrite_string(self, content: Any) -> Any:
        """Rewrite a content body, widget text or HTML fragment."""
        if not isinstance(content, str) or content == "":
            return content
        return replace_in_string(content, self.replacement_pairs())

    def rewrite_url(self, url: Any) -> Any:
        """Rewrite a single attachment URL."""
        return self.rewrite_string(url)

    def rewrite_image_src(self, image: Any, *args: Any) -> Any:
        """Rewrite the URL of an image descriptor ``(url, width, height, is_intermediate)``.

        Only element 0 changes; the other elements and the container type are kept.
        """
        if not isinstance(image, (list, tuple)) or not image or not isinstance(image[0], str):
            return image
        url = self.rewrite_string(image[0])
        if isinstance(image, list):
            return [url, *image[1:]]
        if hasattr(image, "_make"):  # namedtuple
            return image._make((url, *image[1:]))
        return (url, *image[1:])

    def rewrite_srcset(self, sources: Any, *args: Any) -> Any:
        """Rewrite the ``url`` of every candidate in a responsive image table."""
        if not isinstance(sources, dict):
            return sources

        pairs = self.replacement_pairs()
        rewritten = {}
        for width, source in sources.items():
            if isinstance(source, dict) and isinstance(source.get("url"), str):
                source = {**source, "url": replace_in_string(source["url"], pairs)}
            rewritten[width] = source
        return rewritten

    def is_meta_key_allowed(self, meta_key: str) -> bool:
        """Whether structured rewriting may run on values stored under ``meta_key``."""
        return sanitize_key(meta_key) in self.store.load_meta_key_whitelist()

    def deep_rewrite(self, value: Any) -> Any:
        return deep_replace(value, self.replacement_pairs(), max_depth=self.max_depth)

    def rewrite_meta_value(self, meta_key: Any, object_id: int, current_value: Any, single: bool) -> Any:
        """Rewrite a metadata value at read time.

        Keys outside the whitelist pass ``current_value`` through untouched.
        When the host has not produced a value yet (``current_value is None``)
        the raw rows are read directly from the meta store, so that returning a
        value here can replace the host's own lookup. A key with no stored rows
        stays None (absent), which is distinct from a stored empty string.
        """
        if not isinstance(meta_key, str) or meta_key == "":
            return current_value
        if not self.is_meta_key_allowed(meta_key):
            return current_value

        if current_value is not None:
            return self.deep_rewrite(current_value)

        if self.meta_store is None:
            return current_value

        raw = self.meta_store.load_raw(meta_key, object_id, single)
        if raw is None:
            return None

        logger.debug(f"Rewriting raw {meta_key!r} for object {object_id} (single={single})")
        if single:
            return self.deep_rewrite(raw)
        pairs = self.replacement_pairs()
        return [deep_replace(row, pairs, max_depth=self.max_depth) for row in raw]

    def filter_object_metadata(self, value: Any, object_id: int, meta_key: str, single: bool) -> Any:
        """Filter-chain adapter for ``rewrite_meta_value`` (value first, as filters receive it)."""
        return self.rewrite_meta_value(meta_key, object_id, value, single)
