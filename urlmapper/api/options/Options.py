"""Named options persisted in the ``options`` collection."""

from typing import Any

from ..database.Database import Database
from ..database.DatabaseConfig import DatabaseConfig

OPTIONS_COLLECTION = "options"


class Options:
    """Get and set named option values.

    Each option is one document ``{"name": ..., "value": ...}``. Values are
    stored as given; readers are expected to cope with whatever shape they
    find there.
    """

    def __init__(self, database_config: DatabaseConfig, collection_name: str = OPTIONS_COLLECTION):
        self.database_config = database_config
        self.collection_name = collection_name

    def get_option(self, name: str, default: Any = None) -> Any:
        with Database(self.database_config, self.collection_name) as database:
            doc = database.find_one({"name": name}, {"_id": 0, "value": 1})
        if doc is None or "value" not in doc:
            return default
        return doc["value"]

    def update_option(self, name: str, value: Any) -> None:
        with Database(self.database_config, self.collection_name) as database:
            database.update_one({"name": name}, {"$set": {"name": name, "value": value}}, upsert=True)
