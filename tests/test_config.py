"""
Unit tests for Settings.toml / Secrets.toml loading
"""
import pytest

from config import ConfigError, load_api_key, load_settings


class TestSettings:
    def test_load(self, tmp_path):
        path = tmp_path / "Settings.toml"
        path.write_text('lat = "50.6"\nlon = -3.4\nstep = "600"\n')
        settings = load_settings(path)
        assert settings.lat == "50.6"
        assert settings.lon == "-3.4"
        assert settings.step == "600"
        assert settings.datum == "CD"
        assert settings.days == "3"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Settings.toml"):
            load_settings(tmp_path / "Settings.toml")

    def test_missing_keys(self, tmp_path):
        path = tmp_path / "Settings.toml"
        path.write_text('lat = "50.6"\n')
        with pytest.raises(ConfigError, match="lon"):
            load_settings(path)

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "Settings.toml"
        path.write_text("lat = \n")
        with pytest.raises(ConfigError):
            load_settings(path)


class TestApiKey:
    def test_from_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("WORLDTIDES_KEY", raising=False)
        path = tmp_path / "Secrets.toml"
        path.write_text('key = "abc"\n')
        assert load_api_key(path) == "abc"

    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("WORLDTIDES_KEY", "from-env")
        assert load_api_key(tmp_path / "missing.toml") == "from-env"

    def test_empty_key(self, tmp_path, monkeypatch):
        monkeypatch.delenv("WORLDTIDES_KEY", raising=False)
        path = tmp_path / "Secrets.toml"
        path.write_text('key = ""\n')
        with pytest.raises(ConfigError):
            load_api_key(path)
