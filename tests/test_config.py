"""Tests for configuration and the zero-configuration entry point."""

import pytest
from pydantic import ValidationError

from vienna import StaticApplication, create_app
from vienna.config import ServerConfig, Settings


class TestServerConfig:
    def test_defaults(self):
        config = ServerConfig()
        assert config.root == "public"
        assert config.max_age == 3600
        assert config.cache_control == "public, max-age=3600"

    def test_immutable(self):
        config = ServerConfig(root="_site")
        with pytest.raises(ValidationError):
            config.root = "elsewhere"

    def test_rejects_negative_max_age(self):
        with pytest.raises(ValidationError):
            ServerConfig(max_age=-5)

    def test_updated_copy(self):
        config = ServerConfig(root="_site")
        copy = config.updated(max_age=60)
        assert copy == ServerConfig(root="_site", max_age=60)
        assert config.max_age == 3600
        with pytest.raises(ValidationError):
            config.updated(colour="red")


class TestSettings:
    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.ROOT == "public"
        assert settings.MAX_AGE == 3600
        assert settings.PORT == 8000

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("VIENNA_ROOT", "_site")
        monkeypatch.setenv("VIENNA_MAX_AGE", "86400")
        config = Settings().server_config()
        assert config == ServerConfig(root="_site", max_age=86400)

    def test_reads_env_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("VIENNA_MAX_AGE=60\n")
        assert Settings().MAX_AGE == 60


class TestCreateApp:
    def test_uses_environment(self, monkeypatch, tmp_path):
        site = tmp_path / "site"
        site.mkdir()
        (site / "index.html").write_text("hi")
        monkeypatch.setenv("VIENNA_ROOT", str(site))
        app = create_app()
        assert isinstance(app, StaticApplication)
        assert app.config.root == str(site)
        assert app.entries == frozenset({"index.html"})

    def test_options_override_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("VIENNA_MAX_AGE", "10")
        app = create_app(root=str(tmp_path), max_age=20)
        assert app.config.max_age == 20

    def test_new_instance_each_call(self, tmp_path):
        assert create_app(root=str(tmp_path)) is not create_app(root=str(tmp_path))

    def test_config_and_options_are_merged(self, tmp_path):
        app = create_app(ServerConfig(root=str(tmp_path)), max_age=5)
        assert app.config.root == str(tmp_path)
        assert app.config.max_age == 5
