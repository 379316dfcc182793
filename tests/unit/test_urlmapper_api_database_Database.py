"""Database public API coverage with mongomock backend (no mocks)."""

import pytest
from pydantic import ValidationError

from tests.unit.conftest import database_config
from urlmapper.api.database.Database import Database
from urlmapper.api.database.DatabaseConfig import DatabaseConfig
from urlmapper.api.options.Options import Options

pytestmark = pytest.mark.database


class TestDatabase:
    def test_operations(self):
        cfg = database_config()
        with Database(cfg, "things") as db:
            db.insert_one({"name": "a", "value": 1})
            db.update_one({"name": "b"}, {"$set": {"name": "b", "value": 2}}, upsert=True)
            assert db.count_documents() == 2
            assert db.find_one({"name": "a"}, {"_id": 0}) == {"name": "a", "value": 1}
            assert db.find_one({"name": "missing"}) is None
            assert [doc["name"] for doc in db.find({}, {"_id": 0}, sort=[("value", -1)])] == ["b", "a"]
            assert db.delete_many({"name": "a"}) == 1
            assert db.count_documents({"name": "a"}) == 0

    def test_find_one_and_update_upserts_counter(self):
        with Database(database_config(), "counters") as db:
            assert db.find_one_and_update({"_id": "seq"}, {"$inc": {"n": 1}})["n"] == 1
            assert db.find_one_and_update({"_id": "seq"}, {"$inc": {"n": 1}})["n"] == 2

    def test_prefixes_are_isolated(self):
        with Database(database_config(), "things") as db:
            db.insert_one({"name": "a"})
        with Database(database_config(), "things") as db:
            assert db.count_documents() == 0


class TestDatabaseConfig:
    def test_unknown_backend(self):
        with pytest.raises(ValidationError):
            DatabaseConfig(type="sqlite", prefix="x", data={})

    def test_mongo_uri_validated(self):
        with pytest.raises(ValidationError):
            DatabaseConfig(type="mongo", prefix="x", data={"uri": "http://localhost"})

    def test_mongo_config(self):
        cfg = DatabaseConfig(type="mongo", prefix="x", data={"uri": "mongodb://localhost:27017"})
        assert cfg.model_dump()["data"]["uri"] == "mongodb://localhost:27017"


class TestOptions:
    def test_default_when_missing(self):
        assert Options(database_config()).get_option("missing", "fallback") == "fallback"

    def test_update_replaces_value(self):
        options = Options(database_config())
        options.update_option("name", [1, 2])
        options.update_option("name", {"a": 1})
        assert options.get_option("name") == {"a": 1}
