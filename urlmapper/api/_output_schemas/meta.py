"""Output schemas for meta commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class MetaKeysOutput(BaseOutputSchema):
    keys: list[str] = Field(..., description="Effective meta-key whitelist")
    defaults: list[str] = Field(..., description="Built-in keys that are always whitelisted")


class MetaSetKeysOutput(BaseOutputSchema):
    keys: list[str] = Field(..., description="Persisted meta-key whitelist")


class MetaGetOutput(BaseOutputSchema):
    object_id: int = Field(..., description="Object the metadata belongs to")
    key: str = Field(..., description="Meta key that was read")
    single: bool = Field(..., description="Whether a single value was requested")
    value: Any = Field(..., description="Value after read-time rewriting")


class MetaAddOutput(BaseOutputSchema):
    object_id: int = Field(..., description="Object the metadata belongs to")
    key: str = Field(..., description="Meta key that was stored")
    meta_id: int = Field(..., description="Identifier of the stored row, 0 if nothing was stored")


register_output_schema("meta", "keys", MetaKeysOutput)
register_output_schema("meta", "set_keys", MetaSetKeysOutput)
register_output_schema("meta", "get", MetaGetOutput)
register_output_schema("meta", "add", MetaAddOutput)
