"""Mock MongoDB collection implementation using mongomock."""

from typing import Any

from pymongo import ReturnDocument
from pymongo.collection import Collection

from .._AbstractImpl import _AbstractImpl
from ..DatabaseConfig import DatabaseConfig
from ._client import _get_mongomock_client
from ._Data import _Data


class _Impl(_AbstractImpl):
    def __init__(self, db_config: DatabaseConfig, database_name: str, collection_name: str):
        if not isinstance(db_config.data, _Data):
            raise ValueError("MongoMock config data is required")
        self.database_name = database_name
        self.collection_name = collection_name
        self._client = None
        self._collection: Collection | None = None

    def __enter__(self):
        self._client = _get_mongomock_client()
        self._collection = self._client[self.database_name][self.collection_name]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Don't close shared client - it's reused across instances
        self._collection = None
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
