"""Tests for configuration loading."""

import pytest

from tool_server.utils.config import ServerConfig, Settings, get_settings, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for var in ("SERVER_NAME", "SERVER_VERSION", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)


class TestSettings:
    """Tests for environment-based settings."""

    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.server_name == "my-mcp-server"
        assert settings.server_version == "1.0.0"
        assert settings.log_level == "INFO"

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test env vars set server identity."""
        monkeypatch.setenv("SERVER_NAME", "custom")
        monkeypatch.setenv("SERVER_VERSION", "2.3.4")

        settings = get_settings()
        assert settings.server_name == "custom"
        assert settings.server_version == "2.3.4"


class TestLoadConfig:
    """Tests for YAML config files."""

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == ServerConfig()

    def test_file_overrides_environment(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test values from the file win over env vars."""
        monkeypatch.setenv("SERVER_NAME", "from-env")
        monkeypatch.setenv("SERVER_VERSION", "0.0.1")
        path = tmp_path / "server.yaml"
        path.write_text("server:\n  name: from-file\nlogging:\n  level: DEBUG\n")

        settings = get_settings(path)
        assert settings.server_name == "from-file"
        assert settings.server_version == "0.0.1"
        assert settings.log_level == "DEBUG"
