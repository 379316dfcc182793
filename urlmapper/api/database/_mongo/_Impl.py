"""MongoDB collection implementation."""

from typing import Any

from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection

from .._AbstractImpl import _AbstractImpl
from ..DatabaseConfig import DatabaseConfig
from ._Data import _Data as _DatabaseConfigData


class _Impl(_AbstractImpl):
    def __init__(self, database_config: DatabaseConfig, database_name: str, collection_name: str):
        """Initialize MongoDB implementation.

        Note: Internally MongoDB uses "collections" but the public API uses "database" terminology.
        The collection_name parameter maps to a MongoDB collection.
        """
        if not isinstance(database_config.data, _DatabaseConfigData):
            raise ValueError("MongoDB config data is required")
        self.uri = database_config.data.uri
        self.timeout_ms = database_config.data.timeout_ms
        self.database_name = database_name
        self.collection_name = collection_name
        self._client: MongoClient[Any] | None = None
        self._collection: Collection | None = None

    def __enter__(self):
        self._client = MongoClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
        self._collection = self._client[self.database_name][self.collection_name]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._client:
            self._client.close()
        return False

    def count_documents(self, filter: dict[str, Any] | None = None) -> int:
        return self._collection.count_documents(filter or {})  # type: ignore[union-attr]

    def find_one(
        self,
        filter: dict[str, Any],
        projection: dict[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
    ) -> dict[str, Any] | None:
        return self._collection.find_one(filter, projection, sort=sort)  # type: ignore[union-attr]

    def find_one_and_update(self, filter: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
        return self._collection.find_one_and_update(  # type: ignore[union-attr]
            filter, update, upsert=True, return_document=ReturnDocument.AFTER
        )

    def update_one(self, filter: dict[str, Any], update: dict[str, Any], upsert: bool = False) -> None:
        self._collection.update_one(filter, update, upsert=upsert)  # type: ignore[union-attr]

    def insert_one(self, document: dict[str, Any]) -> Any:
        return self._collection.insert_one(document).inserted_id  # type: ignore[union-attr]

    def delete_many(self, filter: dict[str, Any]) -> int:
        return self._collection.delete_many(filter).deleted_count  # type: ignore[union-attr]

    def find(
        self,
        filter: dict[str, Any] | None = None,
        projection: dict[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
    ) -> Any:
        return self._collection.find(filter or {}, projection, sort=sort)  # type: ignore[union-attr]
