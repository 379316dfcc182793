"""MongoDB-specific configuration data."""

from pydantic import BaseModel, Field, model_validator


class _Data(BaseModel):
    uri: str = Field(
        ...,
        description="MongoDB connection URI (required).",
    )
    timeout_ms: int = Field(
        default=5000,
        gt=0,
        description="Server selection timeout in milliseconds.",
    )

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_fields(self) -> "_Data":
        if not (self.uri.startswith("mongodb://") or self.uri.startswith("mongodb+srv://")):
            raise ValueError(f"database.uri must start with 'mongodb://' (found: {self.uri!r})")
        return self
