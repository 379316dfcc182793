"""Unit tests for configuration loading, saving and the config commands."""

import json

import pytest
from pydantic import ValidationError

from tests.unit.conftest import run_cmd
from urlmapper.api.config.cmd_show import cmd_show
from urlmapper.api.config.cmd_version import cmd_version
from urlmapper.api.config.RewriteConfig import RewriteConfig
from urlmapper.api.config.SiteConfig import SiteConfig, set_url_scheme
from urlmapper.api.config.URLMapperConfig import URLMapperConfig

pytestmark = pytest.mark.config


class TestSiteConfig:
    def test_root_urls_both_schemes(self):
        site = SiteConfig(home_url="https://site.example")
        assert site.root_urls() == ["http://site.example", "https://site.example"]

    def test_site_url_adds_variants(self):
        site = SiteConfig(home_url="https://site.example", site_url="http://site.example/wp")
        assert site.root_urls() == [
            "http://site.example",
            "https://site.example",
            "http://site.example/wp",
            "https://site.example/wp",
        ]

    def test_invalid_home_url(self):
        with pytest.raises(ValidationError):
            SiteConfig(home_url="not a url")

    def test_set_url_scheme(self):
        assert set_url_scheme("http://site.example/path", "https") == "https://site.example/path"
        assert set_url_scheme("//site.example", "http") == "http://site.example"
        assert set_url_scheme("", "http") == ""


class TestRewriteConfig:
    def test_default_depth(self):
        assert RewriteConfig().max_depth == 10

    def test_negative_depth_rejected(self):
        with pytest.raises(ValidationError):
            RewriteConfig(max_depth=-1)


class TestURLMapperConfig:
    def test_home_dir_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("URLMAPPER_HOME", str(tmp_path))
        assert URLMapperConfig.get_config_path() == tmp_path.resolve() / "config.json"

    def test_load(self, urlmapper_home):
        config = URLMapperConfig.load()
        assert config.site.home_url == "https://site.example"
        assert config.database.type == "mongomock"
        assert config.rewrite.max_depth == 10
        assert config.log.level == "INFO"

    def test_load_missing(self, tmp_path, monkeypatch):
        monkeypatch.setenv("URLMAPPER_HOME", str(tmp_path))
        with pytest.raises(ValueError, match="not found"):
            URLMapperConfig.load()

    def test_load_invalid_json(self, tmp_path, monkeypatch):
        monkeypatch.setenv("URLMAPPER_HOME", str(tmp_path))
        (tmp_path / "config.json").write_text("{invalid json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            URLMapperConfig.load()

    def test_load_unknown_section(self, tmp_path, monkeypatch, minimal_config_dict):
        monkeypatch.setenv("URLMAPPER_HOME", str(tmp_path))
        (tmp_path / "config.json").write_text(json.dumps({**minimal_config_dict, "extra": {}}))
        with pytest.raises(ValueError, match="validation error"):
            URLMapperConfig.load()

    def test_load_unknown_backend(self, tmp_path, monkeypatch, minimal_config_dict):
        monkeypatch.setenv("URLMAPPER_HOME", str(tmp_path))
        minimal_config_dict["database"]["type"] = "sqlite"
        (tmp_path / "config.json").write_text(json.dumps(minimal_config_dict))
        with pytest.raises(ValueError, match="validation error"):
            URLMapperConfig.load()

    def test_save_round_trip(self, urlmapper_home):
        config = URLMapperConfig.load()
        config.rewrite.max_depth = 3
        config.save()
        assert URLMapperConfig.load().rewrite.max_depth == 3
        assert not (urlmapper_home / "config.json.tmp").exists()


class TestCmdShow:
    def test_lists_sections(self, urlmapper_home):
        result = run_cmd(cmd_show, "")
        assert result.success
        assert result.output["content"] == {"sections": ["site", "database", "rewrite", "log"]}

    def test_section(self, urlmapper_home):
        result = run_cmd(cmd_show, "site")
        assert result.success
        assert result.output["content"]["home_url"] == "https://site.example"

    def test_unknown_section(self, urlmapper_home):
        result = run_cmd(cmd_show, "bogus")
        assert not result.success
        assert "Unknown section" in result.output["errors"][0]

    def test_invalid_config_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("URLMAPPER_HOME", str(tmp_path))
        (tmp_path / "config.json").write_text("{invalid json")
        result = run_cmd(cmd_show, "site")
        assert not result.success
        assert result.output["section"] == "site"


class TestCmdVersion:
    def test_version(self):
        result = run_cmd(cmd_version)
        assert result.success
        assert result.output["version"]
        assert result.output["full_version"].startswith(result.output["version"])
