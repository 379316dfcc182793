"""MetaStore and MetaReader against a mongomock database (no mocks)."""

import pytest

from tests.unit.conftest import database_config
from urlmapper.api.hooks import OBJECT_METADATA, HookRegistry, register_filters
from urlmapper.api.mapping.MappingStore import MappingStore
from urlmapper.api.meta.MetaReader import MetaReader
from urlmapper.api.meta.MetaStore import MetaStore
from urlmapper.api.options.Options import Options
from urlmapper.api.rewrite.URLRewriter import URLRewriter

pytestmark = pytest.mark.meta

LOCAL = "/wp-content/uploads/audio/a.mp3"
REMOTE = "https://cdn.example/audio/a.mp3"


@pytest.fixture
def meta_store() -> MetaStore:
    return MetaStore(database_config())


@pytest.fixture
def reader(site, meta_store) -> MetaReader:
    store = MappingStore(Options(meta_store.database_config))
    store.save([{"local_prefix": "/wp-content/uploads/audio/", "remote_base": "https://cdn.example/audio/"}])
    hooks = HookRegistry()
    register_filters(hooks, URLRewriter(store=store, site=site, meta_store=meta_store))
    return MetaReader(hooks, meta_store)


class TestMetaStore:
    def test_ids_increase(self, meta_store):
        first = meta_store.add(1, "word_audio_file", "a")
        second = meta_store.add(2, "word_audio_file", "b")
        assert second > first

    def test_load_raw_single_is_latest(self, meta_store):
        meta_store.add(1, "word_audio_file", "old")
        meta_store.add(1, "word_audio_file", "new")
        assert meta_store.load_raw("word_audio_file", 1, single=True) == "new"

    def test_load_raw_multi_in_storage_order(self, meta_store):
        meta_store.add(1, "word_audio_file", "first")
        meta_store.add(1, "word_audio_file", "second")
        meta_store.add(2, "word_audio_file", "other object")
        assert meta_store.load_raw("word_audio_file", 1, single=False) == ["first", "second"]

    def test_load_raw_absent(self, meta_store):
        assert meta_store.load_raw("word_audio_file", 1, single=True) is None
        assert meta_store.load_raw("word_audio_file", 1, single=False) is None

    def test_structured_values_round_trip(self, meta_store):
        meta_store.add(1, "audio_file_path", {"files": ["a", "b"]})
        assert meta_store.load_raw("audio_file_path", 1, single=True) == {"files": ["a", "b"]}

    def test_delete(self, meta_store):
        meta_store.add(1, "word_audio_file", "a")
        meta_store.add(1, "word_audio_file", "b")
        assert meta_store.delete(1, "word_audio_file") == 2
        assert meta_store.load_raw("word_audio_file", 1, single=True) is None


class TestMetaReader:
    def test_missing_values_without_filters(self, meta_store):
        reader = MetaReader(HookRegistry(), meta_store)
        assert reader.get(1, "word_audio_file", single=True) == ""
        assert reader.get(1, "word_audio_file", single=False) == []

    def test_whitelisted_key_rewritten(self, reader, meta_store):
        meta_store.add(1, "word_audio_file", LOCAL)
        assert reader.get(1, "word_audio_file", single=True) == REMOTE
        assert reader.get(1, "word_audio_file", single=False) == [REMOTE]

    def test_other_keys_read_raw(self, reader, meta_store):
        meta_store.add(1, "title", LOCAL)
        assert reader.get(1, "title", single=True) == LOCAL

    def test_whitelisted_but_absent(self, reader):
        assert reader.get(1, "word_audio_file", single=True) == ""
        assert reader.get(1, "word_audio_file", single=False) == []

    def test_stored_empty_string(self, reader, meta_store):
        meta_store.add(1, "word_audio_file", "")
        assert reader.get(1, "word_audio_file", single=True) == ""

    def test_earlier_filter_value_is_rewritten(self, reader):
        reader.hooks.add_filter(OBJECT_METADATA, lambda value, *args: {"cached": LOCAL}, accepted_args=4)
        assert reader.get(1, "word_audio_file", single=True) == {"cached": REMOTE}
