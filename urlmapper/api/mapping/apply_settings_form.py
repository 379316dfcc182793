"""Apply a submitted settings form to the store."""

from typing import Any

from pydantic import BaseModel, Field

from .MappingRecord import MappingRecord
from .MappingStore import MappingStore
from .RejectedMapping import RejectedMapping


class SettingsFormResult(BaseModel):
    mappings: list[MappingRecord] = Field(default_factory=list)
    rejected: list[RejectedMapping] = Field(default_factory=list)
    meta_keys: list[str] = Field(default_factory=list)


def apply_settings_form(store: MappingStore, form: dict[str, Any]) -> SettingsFormResult:
    """Save the mapping rows and the meta-key text of a submitted form.

    ``form`` has the shape of the settings page submission::

        {"mappings": [{"local_prefix": ..., "remote_base": ...}, ...],
         "meta_keys": "word_audio_file\\nother_key"}

    A missing or malformed ``mappings`` field saves an empty table, exactly
    like submitting a form with only blank rows.
    """
    rows = form.get("mappings")
    if not isinstance(rows, list):
        rows = []
    saved = store.save(rows)

    meta_keys = form.get("meta_keys")
    if isinstance(meta_keys, list):
        meta_keys = "\n".join(str(key) for key in meta_keys)
    keys = store.save_meta_key_whitelist(meta_keys or "")

    return SettingsFormResult(mappings=saved.mappings, rejected=saved.rejected, meta_keys=keys)
