"""Rewrite section of urlmapper configuration."""

from pydantic import BaseModel, ConfigDict, Field


class RewriteConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_depth: int = Field(default=10, ge=0, description="Maximum nesting depth rewritten inside metadata values")
