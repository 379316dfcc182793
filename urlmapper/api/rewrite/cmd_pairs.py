"""Show the derived replacement pairs."""

from collections.abc import Iterator

from .._output_schemas.rewrite import RewritePairsOutput
from ..config.URLMapperConfig import URLMapperConfig
from ..StageResult import StageResult
from .build_url_rewriter import build_url_rewriter


def cmd_pairs() -> StageResult:
    """List the search/replace pairs in the order they are applied."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = URLMapperConfig.load()
            yield (0.6, "Deriving replacement pairs...")
            pairs = build_url_rewriter(config).replacement_pairs()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to derive replacement pairs: {e}"
            result_obj.output = RewritePairsOutput(errors=[str(e)], warnings=[], pairs=[], count=0).model_dump(
                mode="python"
            )
            result_obj.success = False
            return

        yield (1.0, "Complete")
        warnings = [] if pairs else ["No mappings configured; rewriting is a no-op"]
        result_obj.result = f"Derived {len(pairs)} replacement pair(s)"
        result_obj.output = RewritePairsOutput(
            errors=[],
            warnings=warnings,
            pairs=[pair.to_dict() for pair in pairs],
            count=len(pairs),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Deriving replacement pairs...", progress_callback=do_work)
