"""Two configured mappings whose local prefixes interact."""

from typing import Literal

from pydantic import BaseModel, Field

from .MappingRecord import MappingRecord

OverlapKind = Literal["duplicate", "shadowed", "nested"]


class MappingOverlap(BaseModel):
    first: MappingRecord = Field(..., description="Mapping registered earlier (higher priority)")
    second: MappingRecord = Field(..., description="Mapping registered later")
    kind: OverlapKind = Field(..., description="How the prefixes overlap")

    @property
    def is_hazard(self) -> bool:
        """True when the later mapping can never take effect where the earlier one matches."""
        return self.kind in ("duplicate", "shadowed")

    def describe(self) -> str:
        first, second = self.first.local_prefix, self.second.local_prefix
        if self.kind == "duplicate":
            return f"{second} is configured twice; the later entry never applies"
        if self.kind == "shadowed":
            return f"{first} is registered before the longer prefix {second}, which it shadows"
        return f"{first} is registered before the shorter prefix {second}, which only applies outside it"
