"""What every urlmapper command hands back to the CLI."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """A mapping, meta or rewrite command, split into announce, progress and outcome.

    The CLI prints ``announce``, drains ``progress_callback`` (which fills in
    ``result``, ``output`` and ``success`` as it runs) and then validates
    ``output`` against the schema registered for the command.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
