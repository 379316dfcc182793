"""Raw access to the host's metadata rows."""

import logging
from typing import Any

from ..database.Database import Database
from ..database.DatabaseConfig import DatabaseConfig
from .MetaRow import MetaRow

logger = logging.getLogger(__name__)

META_COLLECTION = "meta"
COUNTERS_COLLECTION = "counters"


class MetaStore:
    """Direct reads and writes on the ``meta`` collection.

    Nothing here runs filters: ``load_raw`` is the primitive the rewrite
    binding uses so that it never re-enters the host's filtered read path.
    """

    def __init__(self, database_config: DatabaseConfig):
        self.database_config = database_config

    def _next_meta_id(self) -> int:
        with Database(self.database_config, COUNTERS_COLLECTION) as counters:
            counter = counters.find_one_and_update({"_id": "meta_id"}, {"$inc": {"seq": 1}})
        return int(counter["seq"])

    def add(self, object_id: int, meta_key: str, meta_value: Any) -> int:
        """Store a new row and return its ``meta_id``."""
        row = MetaRow(meta_id=self._next_meta_id(), object_id=object_id, meta_key=meta_key, meta_value=meta_value)
        with Database(self.database_config, META_COLLECTION) as database:
            database.insert_one(row.model_dump())
        return row.meta_id

    def load_raw(self, meta_key: str, object_id: int, single: bool) -> Any:
        """Read stored values for ``meta_key`` on ``object_id``.

        Args:
            meta_key: Key as stored.
            object_id: Owning object.
            single: Return only the most recently stored value instead of all of them.

        Returns:
            The latest value when ``single``, otherwise every value in storage
            order. None when no row exists.
        """
        query = {"object_id": object_id, "meta_key": meta_key}
        projection = {"_id": 0, "meta_value": 1}
        with Database(self.database_config, META_COLLECTION) as database:
            if single:
                row = database.find_one(query, projection, sort=[("meta_id", -1)])
                values = None if row is None else [row.get("meta_value")]
            else:
                values = [row.get("meta_value") for row in database.find(query, projection, sort=[("meta_id", 1)])]

        if not values:
            logger.debug(f"No stored rows for {meta_key!r} on object {object_id}")
            return None
        return values[0] if single else values

    def delete(self, object_id: int, meta_key: str) -> int:
        """Delete every row for ``meta_key`` on ``object_id``; returns the count."""
        with Database(self.database_config, META_COLLECTION) as database:
            return database.delete_many({"object_id": object_id, "meta_key": meta_key})
