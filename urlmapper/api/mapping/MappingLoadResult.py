"""Accepted and rejected entries from a load or save."""

from pydantic import BaseModel, Field

from .MappingRecord import MappingRecord
from .RejectedMapping import RejectedMapping


class MappingLoadResult(BaseModel):
    mappings: list[MappingRecord] = Field(default_factory=list)
    rejected: list[RejectedMapping] = Field(default_factory=list)

    def mappings_as_dicts(self) -> list[dict[str, str]]:
        return [mapping.model_dump() for mapping in self.mappings]

    def rejected_as_dicts(self) -> list[dict]:
        return [rejected.model_dump(mode="python") for rejected in self.rejected]
