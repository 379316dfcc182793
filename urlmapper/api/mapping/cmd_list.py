"""List mapping command."""

from collections.abc import Iterator

from .._output_schemas.mapping import MappingListOutput
from ..config.URLMapperConfig import URLMapperConfig
from ..StageResult import StageResult
from .build_mapping_store import build_mapping_store


def cmd_list() -> StageResult:
    """List the effective mappings and any stored entries that were dropped."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = URLMapperConfig.load()
            yield (0.5, "Reading mappings...")
            loaded = build_mapping_store(config).load()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to read mappings: {e}"
            result_obj.output = MappingListOutput(
                errors=[str(e)],
                warnings=[],
                mappings=[],
                rejected=[],
                count=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        warnings = [f"Stored entry dropped: {rejected.reason}" for rejected in loaded.rejected]
        result_obj.result = f"Found {len(loaded.mappings)} mapping(s)"
        result_obj.output = MappingListOutput(
            errors=[],
            warnings=warnings,
            mappings=loaded.mappings_as_dicts(),
            rejected=loaded.rejected_as_dicts(),
            count=len(loaded.mappings),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Listing mappings...", progress_callback=do_work)
