"""Read a metadata value through the host's filtered read path."""

from collections.abc import Iterator

from .._output_schemas.meta import MetaGetOutput
from ..config.URLMapperConfig import URLMapperConfig
from ..hooks.HookRegistry import HookRegistry
from ..hooks.register_filters import register_filters
from ..rewrite.build_url_rewriter import build_url_rewriter
from ..StageResult import StageResult
from .MetaReader import MetaReader


def cmd_get(object_id: int, meta_key: str, single: bool = True) -> StageResult:
    """Read ``meta_key`` of ``object_id`` with read-time rewriting applied."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = URLMapperConfig.load()
            rewriter = build_url_rewriter(config)
            hooks = HookRegistry()
            register_filters(hooks, rewriter)
            yield (0.6, "Reading metadata...")
            value = MetaReader(hooks, rewriter.meta_store).get(object_id, meta_key, single)
            allowed = rewriter.is_meta_key_allowed(meta_key)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to read metadata: {e}"
            result_obj.output = MetaGetOutput(
                errors=[str(e)],
                warnings=[],
                object_id=object_id,
                key=meta_key,
                single=single,
                value=None,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        warnings = [] if allowed else [f"{meta_key!r} is not whitelisted; value returned as stored"]
        result_obj.result = f"Read {meta_key!r} for object {object_id}"
        result_obj.output = MetaGetOutput(
            errors=[],
            warnings=warnings,
            object_id=object_id,
            key=meta_key,
            single=single,
            value=value,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Reading {meta_key!r} for object {object_id}...", progress_callback=do_work)
