"""Store a metadata row."""

import json
from collections.abc import Iterator

from .._output_schemas.meta import MetaAddOutput
from ..config.URLMapperConfig import URLMapperConfig
from ..StageResult import StageResult
from .MetaStore import MetaStore


def _parse_value(value: str):
    """Decode JSON arrays and objects; anything else is stored as the literal string."""
    if value[:1] in ("[", "{"):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            pass
    return value


def cmd_add(object_id: int, meta_key: str, value: str) -> StageResult:
    """Add a row for ``meta_key`` on ``object_id``; values are stored without rewriting."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = URLMapperConfig.load()
            yield (0.6, "Storing metadata...")
            meta_id = MetaStore(config.database).add(object_id, meta_key, _parse_value(value))
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to store metadata: {e}"
            result_obj.output = MetaAddOutput(
                errors=[str(e)], warnings=[], object_id=object_id, key=meta_key, meta_id=0
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Stored {meta_key!r} for object {object_id} as row {meta_id}"
        result_obj.output = MetaAddOutput(
            errors=[], warnings=[], object_id=object_id, key=meta_key, meta_id=meta_id
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Storing {meta_key!r} for object {object_id}...", progress_callback=do_work)
