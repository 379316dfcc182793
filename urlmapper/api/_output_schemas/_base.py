"""Fields shared by every command output."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Common shape of mapping, meta, rewrite and config outputs.

    Rejected mapping rows and overlap hazards surface as ``warnings``; failures
    that stop a command surface as ``errors``.
    """

    errors: list[str] = Field(default_factory=list, description="Messages for failures that stopped the command")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal notes such as dropped or shadowed mappings")
