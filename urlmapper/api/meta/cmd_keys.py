"""Show the meta-key whitelist."""

from collections.abc import Iterator

from .._output_schemas.meta import MetaKeysOutput
from ..config.URLMapperConfig import URLMapperConfig
from ..mapping.build_mapping_store import build_mapping_store
from ..mapping.MappingStore import DEFAULT_META_KEYS
from ..StageResult import StageResult


def cmd_keys() -> StageResult:
    """List the metadata keys whose values are rewritten at read time."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = URLMapperConfig.load()
            yield (0.6, "Reading whitelist...")
            keys = build_mapping_store(config).load_meta_key_whitelist()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to read meta keys: {e}"
            result_obj.output = MetaKeysOutput(
                errors=[str(e)],
                warnings=[],
                keys=[],
                defaults=list(DEFAULT_META_KEYS),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"{len(keys)} meta key(s) whitelisted"
        result_obj.output = MetaKeysOutput(
            errors=[],
            warnings=[],
            keys=keys,
            defaults=list(DEFAULT_META_KEYS),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Listing whitelisted meta keys...", progress_callback=do_work)
