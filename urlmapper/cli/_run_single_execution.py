"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import Any

from urlmapper.api.validate_output import validate_output


def _run_single_execution(
    func: Callable,
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
) -> None:
    """Run command once and display result.

    Commands handle their own exceptions and report them through their
    output schema; anything escaping here is a programming error.
    """
    result = func(*args, **kwargs)

    display.status(result.announce)

    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        raise ValueError(f"Output structure validation failed: {e}") from e

    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    for warning in result.output.get("warnings", []):
        display.warning(warning)

    display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
