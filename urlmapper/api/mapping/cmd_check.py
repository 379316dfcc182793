"""Check mappings for overlapping prefixes."""

from collections.abc import Iterator

from .._output_schemas.mapping import MappingCheckOutput
from ..config.URLMapperConfig import URLMapperConfig
from ..StageResult import StageResult
from .build_mapping_store import build_mapping_store
from .find_overlapping_mappings import find_overlapping_mappings


def cmd_check() -> StageResult:
    """Report mappings whose prefixes overlap.

    Shadowed and duplicate prefixes are errors: the later mapping never
    applies where the earlier one matches. Nested prefixes are warnings.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = URLMapperConfig.load()
            yield (0.5, "Reading mappings...")
            loaded = build_mapping_store(config).load()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to read mappings: {e}"
            result_obj.output = MappingCheckOutput(
                errors=[str(e)],
                warnings=[],
                overlaps=[],
                count=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.8, "Comparing prefixes...")
        overlaps = find_overlapping_mappings(loaded.mappings)
        errors = [overlap.describe() for overlap in overlaps if overlap.is_hazard]
        warnings = [overlap.describe() for overlap in overlaps if not overlap.is_hazard]
        warnings.extend(f"Stored entry dropped: {rejected.reason}" for rejected in loaded.rejected)

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(overlaps)} overlap(s) among {len(loaded.mappings)} mapping(s)"
        result_obj.output = MappingCheckOutput(
            errors=errors,
            warnings=warnings,
            overlaps=[overlap.model_dump() for overlap in overlaps],
            count=len(loaded.mappings),
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(announce="Checking mappings for overlaps...", progress_callback=do_work)
