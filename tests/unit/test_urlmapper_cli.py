"""CLI smoke tests through Typer's CliRunner."""

import json

import pytest
from typer.testing import CliRunner

from urlmapper.cli import main
from urlmapper.cli._create_app import _create_app

pytestmark = pytest.mark.cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def invoke_json(runner, *args):
    result = runner.invoke(_create_app(), ["--display", "json", *args])
    return result, json.loads(result.stdout)


class TestCLI:
    def test_help(self, runner):
        result = runner.invoke(_create_app(), [])
        assert result.exit_code == 0
        assert "mapping" in result.stdout

    def test_invalid_display(self, runner, urlmapper_home):
        result = runner.invoke(_create_app(), ["--display", "xml", "mapping", "list"])
        assert result.exit_code == 1

    def test_mapping_add_list_and_rewrite(self, runner, urlmapper_home):
        result, output = invoke_json(runner, "mapping", "add", "wp-content/uploads/audio", "https://cdn.example/audio")
        assert result.exit_code == 0
        assert output["mapping"]["local_prefix"] == "/wp-content/uploads/audio/"

        result, output = invoke_json(runner, "mapping", "list")
        assert output["count"] == 1

        result, output = invoke_json(runner, "rewrite", "string", "/wp-content/uploads/audio/a.mp3")
        assert result.exit_code == 0
        assert output["output"] == "https://cdn.example/audio/a.mp3"

    def test_failure_exit_code(self, runner, urlmapper_home):
        result, output = invoke_json(runner, "mapping", "remove", "/nope/")
        assert result.exit_code == 1
        assert output["errors"]

    def test_meta_set_keys_and_get(self, runner, urlmapper_home):
        result, output = invoke_json(runner, "meta", "set-keys", "lesson_audio", "other_key")
        assert output["keys"] == ["lesson_audio", "other_key"]

        invoke_json(runner, "mapping", "add", "/audio/", "https://cdn.example/audio/")
        invoke_json(runner, "meta", "add", "3", "lesson_audio", "/audio/a.mp3")
        result, output = invoke_json(runner, "meta", "get", "3", "lesson_audio", "--multi")
        assert output["value"] == ["https://cdn.example/audio/a.mp3"]

    def test_yaml_is_default(self, runner, urlmapper_home):
        result = runner.invoke(_create_app(), ["config", "show", "rewrite"])
        assert result.exit_code == 0
        assert "max_depth: 10" in result.stdout

    def test_main_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.startswith("urlmap ")
