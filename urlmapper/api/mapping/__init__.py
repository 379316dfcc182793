"""Mapping table: normalization, validation and persistence."""

from .apply_settings_form import SettingsFormResult, apply_settings_form
from .find_overlapping_mappings import find_overlapping_mappings
from .MappingLoadResult import MappingLoadResult
from .MappingOverlap import MappingOverlap
from .MappingRecord import MappingRecord
from .MappingStore import DEFAULT_META_KEYS, MappingStore
from .normalize_local_prefix import normalize_local_prefix
from .RejectedMapping import RejectedMapping
from .sanitize_key import sanitize_key
from .sanitize_remote_url import sanitize_remote_url

__all__ = [
    "DEFAULT_META_KEYS",
    "MappingLoadResult",
    "MappingOverlap",
    "MappingRecord",
    "MappingStore",
    "RejectedMapping",
    "SettingsFormResult",
    "apply_settings_form",
    "find_overlapping_mappings",
    "normalize_local_prefix",
    "sanitize_key",
    "sanitize_remote_url",
]
