"""Load, validate and persist mapping records and the meta-key whitelist."""

import logging
import re
from collections.abc import Iterable
from typing import Any

from ..options.Options import Options
from .MappingLoadResult import MappingLoadResult
from .MappingRecord import MappingRecord
from .normalize_local_prefix import normalize_local_prefix
from .RejectedMapping import RejectedMapping
from .sanitize_key import sanitize_key
from .sanitize_remote_url import sanitize_remote_url
from .sanitize_text_field import sanitize_text_field

logger = logging.getLogger(__name__)

MAPPINGS_OPTION = "url_mappings"
META_KEYS_OPTION = "url_mapper_meta_keys"

# Always rewritten at read time, whatever the administrator saved.
DEFAULT_META_KEYS: tuple[str, ...] = ("word_audio_file", "audio_file_path")

_NEWLINES = re.compile(r"\r\n|\r|\n")


def _normalize_entry(entry: Any, sanitize_text: bool) -> MappingRecord | str:
    """Return the normalized record for ``entry``, or the reason it is dropped."""
    if not isinstance(entry, dict):
        return f"entry must be a mapping, got {type(entry).__name__}"

    local = str(entry.get("local_prefix") or "").strip()
    remote = str(entry.get("remote_base") or "").strip()
    if local == "":
        return "local_prefix is empty"
    if remote == "":
        return "remote_base is empty"

    if sanitize_text:
        local = sanitize_text_field(local)
    local = normalize_local_prefix(local)
    if local == "":
        return "local_prefix is empty"

    sanitized = sanitize_remote_url(remote)
    if sanitized == "":
        return f"remote_base is not a valid http(s) URL: {remote!r}"
    if not sanitized.endswith("/"):
        sanitized += "/"

    return MappingRecord(local_prefix=local, remote_base=sanitized)


def _split_keys(raw: Any) -> list[str]:
    if isinstance(raw, str):
        raw = _NEWLINES.split(raw)
    if not isinstance(raw, (list, tuple)):
        return []
    keys = (sanitize_key(key) for key in raw if isinstance(key, str))
    return list(dict.fromkeys(key for key in keys if key))


class MappingStore:
    """Store adapter for the mapping table and the meta-key whitelist.

    Stored data is never trusted: every read re-applies the same normalization
    as a save and silently drops entries that do not survive it. Dropped
    entries are reported back in ``MappingLoadResult.rejected`` so an
    administrative surface can explain why a row vanished.

    Authorization and anti-forgery checks are the caller's job and must
    happen before any ``save*`` method is called.
    """

    def __init__(self, options: Options):
        self.options = options

    def load(self) -> MappingLoadResult:
        """Read the effective mapping records, in stored order."""
        raw = self.options.get_option(MAPPINGS_OPTION, [])
        if not isinstance(raw, list):
            logger.debug(f"Ignoring non-list {MAPPINGS_OPTION} option of type {type(raw).__name__}")
            raw = []
        return self._filter(raw, sanitize_text=False)

    def save(self, raw_entries: Iterable[Any]) -> MappingLoadResult:
        """Normalize ``raw_entries`` and persist the ones that survive.

        Invalid entries are omitted, never fatal. Returns what was persisted
        and what was dropped.
        """
        result = self._filter(list(raw_entries), sanitize_text=True)
        self.options.update_option(MAPPINGS_OPTION, result.mappings_as_dicts())
        logger.info(f"Saved {len(result.mappings)} mapping(s), dropped {len(result.rejected)}")
        return result

    def load_meta_key_whitelist(self) -> list[str]:
        """Effective whitelist: the stored keys plus the built-in defaults."""
        keys = _split_keys(self.options.get_option(META_KEYS_OPTION, list(DEFAULT_META_KEYS)))
        if not keys:
            keys = list(DEFAULT_META_KEYS)
        return list(dict.fromkeys([*DEFAULT_META_KEYS, *keys]))

    def save_meta_key_whitelist(self, raw_text: Any) -> list[str]:
        """Persist a newline-delimited key list; an empty list saves the defaults."""
        keys = _split_keys(raw_text if isinstance(raw_text, str) else "")
        if not keys:
            keys = list(DEFAULT_META_KEYS)
        self.options.update_option(META_KEYS_OPTION, keys)
        logger.info(f"Saved meta-key whitelist: {', '.join(keys)}")
        return keys

    @staticmethod
    def _filter(entries: list[Any], sanitize_text: bool) -> MappingLoadResult:
        result = MappingLoadResult()
        for entry in entries:
            normalized = _normalize_entry(entry, sanitize_text)
            if isinstance(normalized, MappingRecord):
                result.mappings.append(normalized)
            else:
                logger.debug(f"Dropping mapping entry {entry!r}: {normalized}")
                result.rejected.append(RejectedMapping(entry=entry, reason=normalized))
        return result
