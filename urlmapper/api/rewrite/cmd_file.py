"""Rewrite the content of a file."""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.rewrite import RewriteFileOutput
from ..config.URLMapperConfig import URLMapperConfig
from ..StageResult import StageResult
from .build_url_rewriter import build_url_rewriter


def cmd_file(path: str, output_path: str = "") -> StageResult:
    """Rewrite the text of ``path``.

    The source file is never modified. With ``output_path`` the rewritten
    text is written there; without it nothing is written and the output only
    reports whether anything would change.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        written = ""
        try:
            config = URLMapperConfig.load()
            yield (0.4, f"Reading {path}...")
            source = Path(path).expanduser()
            text = source.read_text(encoding="utf-8")
            yield (0.7, "Rewriting...")
            rewritten = build_url_rewriter(config).rewrite_string(text)
            if output_path:
                target = Path(output_path).expanduser()
                if target.resolve() == source.resolve():
                    raise ValueError("Refusing to overwrite the source file; choose another output path")
                target.write_text(rewritten, encoding="utf-8")
                written = str(target)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to rewrite {path}: {e}"
            result_obj.output = RewriteFileOutput(
                errors=[str(e)], warnings=[], path=path, output_path="", changed=False
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        changed = rewritten != text
        result_obj.result = f"Rewrote {path}" if changed else f"No local URLs matched in {path}"
        result_obj.output = RewriteFileOutput(
            errors=[], warnings=[], path=path, output_path=written, changed=changed
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Rewriting {path}...", progress_callback=do_work)
