"""Database public API."""

import importlib
from typing import Any

from ._AbstractImpl import _AbstractImpl
from .DatabaseConfig import _BACKEND_REGISTRY, DatabaseConfig


class Database:
    """Public API for database operations.

    One instance addresses one collection (``database_name``) inside the
    MongoDB database named by ``database_config.prefix``.
    """

    def __init__(self, database_config: DatabaseConfig, database_name: str):
        self.database_config = database_config
        self.prefix = database_config.prefix
        self.database_name = database_name
        self._impl: _AbstractImpl | None = None

    def __enter__(self):
        backend_type = self.database_config.type

        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        module = importlib.import_module(f"urlmapper.api.database._{backend_type}._Impl")
        impl_class = module._Impl
        # _Impl expects: (database_config, database_name, collection_name)
        self._impl = impl_class(self.database_config, self.prefix, self.database_name)
        self._impl.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._impl:
            return self._impl.__exit__(exc_type, exc_val, exc_tb)
        return False

    def count_documents(self, filter: dict[str, Any] | None = None) -> int:
        return self._impl.count_documents(filter)  # type: ignore[union-attr]

    def find_one(
        self,
        filter: dict[str, Any],
        projection: dict[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
    ) -> dict[str, Any] | None:
        return self._impl.find_one(filter, projection, sort)  # type: ignore[union-attr]

    def find_one_and_update(self, filter: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
        return self._impl.find_one_and_update(filter, update)  # type: ignore[union-attr]

    def update_one(self, filter: dict[str, Any], update: dict[str, Any], upsert: bool = False) -> None:
        self._impl.update_one(filter, update, upsert)  # type: ignore[union-attr]

    def insert_one(self, document: dict[str, Any]) -> Any:
        return self._impl.insert_one(document)  # type: ignore[union-attr]

    def delete_many(self, filter: dict[str, Any]) -> int:
        return self._impl.delete_many(filter)  # type: ignore[union-attr]

    def find(
        self,
        filter: dict[str, Any] | None = None,
        projection: dict[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
    ) -> Any:
        return self._impl.find(filter, projection, sort)  # type: ignore[union-attr]
