"""Output schemas for rewrite commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RewritePairsOutput(BaseOutputSchema):
    pairs: list[dict[str, str]] = Field(..., description="Derived search/replace pairs in application order")
    count: int = Field(..., description="Number of pairs")


class RewriteStringOutput(BaseOutputSchema):
    input: str = Field(..., description="Original text")
    output: str = Field(..., description="Rewritten text")
    changed: bool = Field(..., description="Whether rewriting changed the text")


class RewriteFileOutput(BaseOutputSchema):
    path: str = Field(..., description="File that was read")
    output_path: str = Field(..., description="File that was written, empty when nothing was written")
    changed: bool = Field(..., description="Whether rewriting changed the content")


register_output_schema("rewrite", "pairs", RewritePairsOutput)
register_output_schema("rewrite", "string", RewriteStringOutput)
register_output_schema("rewrite", "file", RewriteFileOutput)
