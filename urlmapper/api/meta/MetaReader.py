"""The host's filtered metadata read path."""

from typing import Any

from ..hooks.HookRegistry import HookRegistry
from ..hooks.hook_names import OBJECT_METADATA
from .MetaStore import MetaStore


class MetaReader:
    """Read metadata the way the host does.

    The ``object_metadata`` filter runs first with ``None``; any non-None
    result short-circuits the lookup. Otherwise the reader falls back to the
    raw rows. The filter chain calls into the rewriter, never the other way
    round.
    """

    def __init__(self, hooks: HookRegistry, meta_store: MetaStore):
        self.hooks = hooks
        self.meta_store = meta_store

    def get(self, object_id: int, meta_key: str, single: bool = False) -> Any:
        """Value for ``meta_key``; a missing single value reads as "" and a missing list as []."""
        check = self.hooks.apply_filters(OBJECT_METADATA, None, object_id, meta_key, single)
        if check is not None:
            return check

        raw = self.meta_store.load_raw(meta_key, object_id, single)
        if raw is None:
            return "" if single else []
        return raw
