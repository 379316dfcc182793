"""Unit tests for the meta commands."""

import pytest

from tests.unit.conftest import run_cmd
from urlmapper.api.mapping.cmd_add import cmd_add as cmd_add_mapping
from urlmapper.api.mapping.MappingStore import DEFAULT_META_KEYS
from urlmapper.api.meta.cmd_add import cmd_add
from urlmapper.api.meta.cmd_get import cmd_get
from urlmapper.api.meta.cmd_keys import cmd_keys
from urlmapper.api.meta.cmd_set_keys import cmd_set_keys

pytestmark = pytest.mark.meta


@pytest.fixture
def audio_mapping(urlmapper_home):
    run_cmd(cmd_add_mapping, "/wp-content/uploads/audio/", "https://cdn.example/audio/")
    return urlmapper_home


class TestCmdKeys:
    def test_defaults(self, urlmapper_home):
        result = run_cmd(cmd_keys)
        assert result.success
        assert result.output["keys"] == list(DEFAULT_META_KEYS)
        assert result.output["defaults"] == list(DEFAULT_META_KEYS)

    def test_set_keys(self, urlmapper_home):
        result = run_cmd(cmd_set_keys, "lesson_audio\nLesson Video")
        assert result.success
        assert result.output["keys"] == ["lesson_audio", "lessonvideo"]
        assert run_cmd(cmd_keys).output["keys"] == [*DEFAULT_META_KEYS, "lesson_audio", "lessonvideo"]


class TestCmdAddGet:
    def test_add_returns_row_id(self, urlmapper_home):
        result = run_cmd(cmd_add, 7, "word_audio_file", "/wp-content/uploads/audio/a.mp3")
        assert result.success
        assert result.output["meta_id"] > 0

    def test_get_rewrites_whitelisted(self, audio_mapping):
        run_cmd(cmd_add, 7, "word_audio_file", "/wp-content/uploads/audio/a.mp3")
        result = run_cmd(cmd_get, 7, "word_audio_file")
        assert result.success
        assert result.output["value"] == "https://cdn.example/audio/a.mp3"
        assert result.output["warnings"] == []

    def test_get_multi_with_json_value(self, audio_mapping):
        run_cmd(cmd_add, 7, "word_audio_file", '["/wp-content/uploads/audio/a.mp3", "x"]')
        result = run_cmd(cmd_get, 7, "word_audio_file", False)
        assert result.output["value"] == [["https://cdn.example/audio/a.mp3", "x"]]

    def test_get_not_whitelisted_warns(self, audio_mapping):
        run_cmd(cmd_add, 7, "title", "/wp-content/uploads/audio/a.mp3")
        result = run_cmd(cmd_get, 7, "title")
        assert result.success
        assert result.output["value"] == "/wp-content/uploads/audio/a.mp3"
        assert result.output["warnings"]

    def test_get_absent_single_is_empty_string(self, audio_mapping):
        result = run_cmd(cmd_get, 8, "word_audio_file")
        assert result.output["value"] == ""

    def test_invalid_json_stored_as_text(self, urlmapper_home):
        run_cmd(cmd_add, 9, "title", "[not json")
        assert run_cmd(cmd_get, 9, "title").output["value"] == "[not json"
