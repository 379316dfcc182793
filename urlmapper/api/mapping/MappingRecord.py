"""A configured local-prefix to remote-base mapping."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MappingRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    local_prefix: str = Field(..., description="Local folder prefix, e.g. /wp-content/uploads/2023/")
    remote_base: str = Field(..., description="Remote base URL the prefix maps to, ending with /")

    @model_validator(mode="after")
    def validate_shape(self) -> "MappingRecord":
        if not self.local_prefix.startswith("/") or not self.local_prefix.endswith("/"):
            raise ValueError(f"local_prefix must begin and end with '/' (found: {self.local_prefix!r})")
        if not self.remote_base.endswith("/"):
            raise ValueError(f"remote_base must end with '/' (found: {self.remote_base!r})")
        return self
