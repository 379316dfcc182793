"""A raw mapping entry that was dropped, and why."""

from typing import Any

from pydantic import BaseModel, Field


class RejectedMapping(BaseModel):
    entry: Any = Field(..., description="The raw entry as found in storage or submitted")
    reason: str = Field(..., description="Why the entry was dropped")
