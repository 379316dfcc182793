"""Where mapping options and object metadata are stored."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ._mongo._Data import _Data as _MongoData
from ._mongomock._Data import _Data as _MongomockData

# Backend name -> settings model. Database picks its implementation from the same names.
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "mongo": _MongoData,
    "mongomock": _MongomockData,
}


class DatabaseConfig(BaseModel):
    """The ``database`` section of config.json.

    ``data`` arrives as a plain dict and is parsed into the settings model of
    the backend named by ``type``.
    """

    type: str = Field(..., description="Storage backend: mongo or mongomock")
    prefix: str = Field(..., description="Database name holding the options and meta collections")
    data: BaseModel = Field(..., description="Settings for the chosen backend")

    @model_validator(mode="before")
    @classmethod
    def _parse_backend_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"database config must be a dict, got {type(values).__name__}")
        backend = values.get("type")
        if not backend:
            raise ValueError("database.type is required")
        data_model = _BACKEND_REGISTRY.get(backend)
        if data_model is None:
            raise ValueError(f"Unknown backend type: {backend!r} (supported: {sorted(_BACKEND_REGISTRY)})")
        data = values.get("data")
        if data is None:
            raise ValueError("database.data is required")
        if isinstance(data, data_model):
            return values
        return {**values, "data": data_model(**data)}

    def model_dump(self, **kwargs) -> dict[str, Any]:
        result = super().model_dump(**kwargs)
        # ``data`` is declared as BaseModel, so pydantic would dump it without its fields.
        result["data"] = self.data.model_dump(**kwargs)
        return result
