"""Output schemas for mapping commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class MappingListOutput(BaseOutputSchema):
    mappings: list[dict[str, str]] = Field(..., description="Effective mapping records in priority order")
    rejected: list[dict[str, Any]] = Field(..., description="Stored entries dropped during load, with reasons")
    count: int = Field(..., description="Number of effective mappings")


class MappingAddOutput(BaseOutputSchema):
    mapping: dict[str, str] = Field(..., description="The normalized record that was added, empty if rejected")
    mappings: list[dict[str, str]] = Field(..., description="Mapping records persisted after the save")
    rejected: list[dict[str, Any]] = Field(..., description="Entries omitted from the save, with reasons")


class MappingRemoveOutput(BaseOutputSchema):
    local_prefix: str = Field(..., description="Normalized prefix that was removed")
    removed: int = Field(..., description="Number of records removed")
    mappings: list[dict[str, str]] = Field(..., description="Mapping records persisted after the save")


class MappingCheckOutput(BaseOutputSchema):
    overlaps: list[dict[str, Any]] = Field(..., description="Pairs of mappings whose prefixes interact")
    count: int = Field(..., description="Number of effective mappings checked")


class MappingImportOutput(BaseOutputSchema):
    mappings: list[dict[str, str]] = Field(..., description="Mapping records persisted by the import")
    rejected: list[dict[str, Any]] = Field(..., description="Rows omitted from the import, with reasons")
    meta_keys: list[str] = Field(..., description="Persisted meta-key whitelist")


register_output_schema("mapping", "list", MappingListOutput)
register_output_schema("mapping", "add", MappingAddOutput)
register_output_schema("mapping", "remove", MappingRemoveOutput)
register_output_schema("mapping", "check", MappingCheckOutput)
register_output_schema("mapping", "import", MappingImportOutput)
