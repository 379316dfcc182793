"""Rewrite a string."""

from collections.abc import Iterator

from .._output_schemas.rewrite import RewriteStringOutput
from ..config.URLMapperConfig import URLMapperConfig
from ..StageResult import StageResult
from .build_url_rewriter import build_url_rewriter


def cmd_string(text: str) -> StageResult:
    """Rewrite ``text`` the way content bodies are rewritten at output time."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = URLMapperConfig.load()
            yield (0.6, "Rewriting...")
            rewritten = build_url_rewriter(config).rewrite_string(text)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to rewrite: {e}"
            result_obj.output = RewriteStringOutput(
                errors=[str(e)], warnings=[], input=text, output=text, changed=False
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        changed = rewritten != text
        result_obj.result = "Text rewritten" if changed else "No local URLs matched"
        result_obj.output = RewriteStringOutput(
            errors=[], warnings=[], input=text, output=rewritten, changed=changed
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Rewriting text...", progress_callback=do_work)
