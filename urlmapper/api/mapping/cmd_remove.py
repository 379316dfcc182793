"""Remove mapping command."""

from collections.abc import Iterator

from .._output_schemas.mapping import MappingRemoveOutput
from ..config.URLMapperConfig import URLMapperConfig
from ..StageResult import StageResult
from .build_mapping_store import build_mapping_store
from .normalize_local_prefix import normalize_local_prefix


def cmd_remove(local_prefix: str) -> StageResult:
    """Remove every mapping whose normalized prefix equals ``local_prefix``."""
    target = normalize_local_prefix(local_prefix)

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = URLMapperConfig.load()
            store = build_mapping_store(config)
            yield (0.5, "Saving mappings...")
            current = store.load()
            kept = [mapping.model_dump() for mapping in current.mappings if mapping.local_prefix != target]
            removed = len(current.mappings) - len(kept)
            saved = store.save(kept) if removed else current
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to remove mapping: {e}"
            result_obj.output = MappingRemoveOutput(
                errors=[str(e)],
                warnings=[],
                local_prefix=target,
                removed=0,
                mappings=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        errors = [] if removed else [f"No mapping for {target or local_prefix!r}"]
        result_obj.result = f"Removed {removed} mapping(s)" if removed else "Nothing removed"
        result_obj.output = MappingRemoveOutput(
            errors=errors,
            warnings=[],
            local_prefix=target,
            removed=removed,
            mappings=saved.mappings_as_dicts(),
        ).model_dump(mode="python")
        result_obj.success = bool(removed)

    return StageResult(announce=f"Removing mapping for {local_prefix!r}...", progress_callback=do_work)
