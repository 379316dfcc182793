"""One literal search/replace instruction."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReplacementPair:
    search: str
    replace: str

    def to_dict(self) -> dict[str, str]:
        return {"search": self.search, "replace": self.replace}
