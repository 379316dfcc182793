"""Display factory for the CLI."""

from collections.abc import Callable
from dataclasses import dataclass, field

from .Display import Display


def _default_factory() -> Display:
    from .CLIDisplay import CLIDisplay

    return CLIDisplay()


@dataclass(frozen=True)
class DisplayContext:
    """Builds the display implementation commands report through."""

    factory: Callable[[], Display] = field(default=_default_factory)

    def get_display(self) -> Display:
        return self.factory()


display_context = DisplayContext()
