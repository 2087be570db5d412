"""Tests for configuration loading."""

from urllib.parse import urlparse

import pytest
from pydantic import ValidationError

from feeddigest.config import (
    DEFAULT_SOURCES,
    Config,
    FetchSettings,
    SourceConfig,
    load_config,
    load_sources,
    save_sources,
)


class TestDefaultSources:
    def test_list_size(self):
        assert 80 <= len(DEFAULT_SOURCES) <= 100

    def test_names_and_urls_unique(self):
        assert len({s.name for s in DEFAULT_SOURCES}) == len(DEFAULT_SOURCES)
        assert len({s.url for s in DEFAULT_SOURCES}) == len(DEFAULT_SOURCES)

    def test_urls_are_http(self):
        for source in DEFAULT_SOURCES:
            parsed = urlparse(source.url)
            assert parsed.scheme in ("http", "https"), source.url
            assert parsed.netloc, source.url

    def test_sources_are_immutable(self):
        with pytest.raises(ValidationError):
            DEFAULT_SOURCES[0].url = "https://changed.test/"


class TestFetchSettings:
    def test_defaults(self):
        settings = FetchSettings()
        assert settings.timeout == 15.0
        assert settings.max_concurrent == 10
        assert settings.default_hours == 24

    def test_rejects_zero_concurrency(self):
        with pytest.raises(ValidationError):
            FetchSettings(max_concurrent=0)


class TestConfig:
    def test_missing_file_uses_defaults(self, tmp_path):
        config = Config(tmp_path / "absent.yaml")

        assert config.config.fetch.timeout == 15.0
        assert config.get_sources() == list(DEFAULT_SOURCES)

    def test_env_var_selects_config(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("fetch:\n  timeout: 5\n  max_concurrent: 4\n")
        monkeypatch.setenv("FEEDDIGEST_CONFIG", str(path))

        config = Config()

        assert config.config_path == path
        assert config.config.fetch.timeout == 5.0
        assert config.config.fetch.max_concurrent == 4

    def test_sources_file_beside_config(self, tmp_path):
        (tmp_path / "config.yaml").write_text("{}\n")
        save_sources([SourceConfig(name="one", url="https://one.test/feed")], tmp_path / "sources.yaml")

        config = Config(tmp_path / "config.yaml")

        assert [s.name for s in config.get_sources()] == ["one"]

    def test_explicit_sources_file_wins(self, tmp_path):
        explicit = tmp_path / "explicit.yaml"
        save_sources([SourceConfig(name="two", url="https://two.test/feed")], explicit)

        config = Config(tmp_path / "config.yaml")

        assert [s.name for s in config.get_sources(explicit)] == ["two"]

    def test_invalid_yaml_raises_value_error(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("fetch: [unclosed\n")

        with pytest.raises(ValueError):
            load_config(path)

    def test_invalid_values_raise_value_error(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("fetch:\n  timeout: -1\n")

        with pytest.raises(ValueError):
            load_config(path)


class TestLoadSources:
    def test_skips_invalid_entries(self, tmp_path):
        path = tmp_path / "sources.yaml"
        path.write_text(
            "sources:\n"
            "  - name: good\n    url: https://good.test/feed\n"
            "  - name: missing-url\n"
            "  - name: disabled\n    url: https://off.test/feed\n    enabled: false\n"
        )

        sources = load_sources(path)

        assert [s.name for s in sources] == ["good", "disabled"]
        assert sources[1].enabled is False

    def test_empty_file(self, tmp_path):
        path = tmp_path / "sources.yaml"
        path.write_text("")

        assert load_sources(path) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_sources(tmp_path / "nope.yaml")

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "out" / "sources.yaml"

        save_sources(DEFAULT_SOURCES, path)

        assert load_sources(path) == list(DEFAULT_SOURCES)
