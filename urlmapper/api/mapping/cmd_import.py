"""Import settings (mappings and meta keys) from a file."""

import json
from collections.abc import Iterator
from pathlib import Path

import yaml

from .._output_schemas.mapping import MappingImportOutput
from ..config.URLMapperConfig import URLMapperConfig
from ..StageResult import StageResult
from .apply_settings_form import apply_settings_form
from .build_mapping_store import build_mapping_store


def _read_form(path: Path) -> dict:
    text = path.read_text(encoding="utf-8")
    form = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
    if not isinstance(form, dict):
        raise ValueError(f"{path} must contain a mapping with 'mappings' and 'meta_keys'")
    return form


def cmd_import(path: str) -> StageResult:
    """Replace the mapping table and meta-key whitelist with the contents of ``path``.

    The file (JSON, or YAML for any other suffix) has the shape of a settings
    form submission: ``mappings`` rows and a ``meta_keys`` list or
    newline-delimited string.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Reading settings file...")
        try:
            form = _read_form(Path(path).expanduser())
            config = URLMapperConfig.load()
            yield (0.6, "Saving settings...")
            saved = apply_settings_form(build_mapping_store(config), form)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to import settings: {e}"
            result_obj.output = MappingImportOutput(
                errors=[str(e)],
                warnings=[],
                mappings=[],
                rejected=[],
                meta_keys=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Imported {len(saved.mappings)} mapping(s) and {len(saved.meta_keys)} meta key(s)"
        result_obj.output = MappingImportOutput(
            errors=[],
            warnings=[f"Row dropped: {rejected.reason}" for rejected in saved.rejected],
            mappings=[mapping.model_dump() for mapping in saved.mappings],
            rejected=[rejected.model_dump() for rejected in saved.rejected],
            meta_keys=saved.meta_keys,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Importing settings from {path}...", progress_callback=do_work)
