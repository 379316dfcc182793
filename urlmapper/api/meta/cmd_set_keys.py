"""Replace the meta-key whitelist."""

from collections.abc import Iterator

from .._output_schemas.meta import MetaSetKeysOutput
from ..config.URLMapperConfig import URLMapperConfig
from ..mapping.build_mapping_store import build_mapping_store
from ..StageResult import StageResult


def cmd_set_keys(keys_text: str) -> StageResult:
    """Save a newline-delimited key list (an empty list restores the defaults)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = URLMapperConfig.load()
            yield (0.6, "Saving whitelist...")
            keys = build_mapping_store(config).save_meta_key_whitelist(keys_text)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to save meta keys: {e}"
            result_obj.output = MetaSetKeysOutput(errors=[str(e)], warnings=[], keys=[]).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Saved {len(keys)} meta key(s)"
        result_obj.output = MetaSetKeysOutput(errors=[], warnings=[], keys=keys).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Saving meta-key whitelist...", progress_callback=do_work)
