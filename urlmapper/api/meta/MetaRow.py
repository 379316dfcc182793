"""One stored metadata row."""

from typing import Any

from pydantic import BaseModel, Field


class MetaRow(BaseModel):
    meta_id: int = Field(..., description="Monotonic row identifier, increasing in insertion order")
    object_id: int = Field(..., description="Object the row belongs to")
    meta_key: str = Field(..., description="Metadata key")
    meta_value: Any = Field(..., description="Stored value")
