"""Add mapping command."""

from collections.abc import Iterator

from .._output_schemas.mapping import MappingAddOutput
from ..config.URLMapperConfig import URLMapperConfig
from ..StageResult import StageResult
from .build_mapping_store import build_mapping_store


def cmd_add(local_prefix: str, remote_base: str) -> StageResult:
    """Append a mapping after the existing ones and save the table.

    Args:
        local_prefix: Local folder prefix, e.g. ``/wp-content/uploads/2023/``.
        remote_base: Remote base URL the prefix maps to.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = URLMapperConfig.load()
            store = build_mapping_store(config)
            yield (0.5, "Saving mappings...")
            current = store.load()
            entries = [*current.mappings_as_dicts(), {"local_prefix": local_prefix, "remote_base": remote_base}]
            saved = store.save(entries)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to add mapping: {e}"
            result_obj.output = MappingAddOutput(
                errors=[str(e)],
                warnings=[],
                mapping={},
                mappings=[],
                rejected=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        errors = [f"Mapping rejected: {rejected.reason}" for rejected in saved.rejected]
        # The new entry is last when it survives normalization.
        added = saved.mappings[-1].model_dump() if not errors and saved.mappings else {}
        result_obj.result = f"Added mapping {added['local_prefix']}" if added else "Mapping was rejected"
        result_obj.output = MappingAddOutput(
            errors=errors,
            warnings=[],
            mapping=added,
            mappings=saved.mappings_as_dicts(),
            rejected=saved.rejected_as_dicts(),
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(announce=f"Adding mapping for {local_prefix!r}...", progress_callback=do_work)
