"""Unit tests for configuration loading."""

import json

import pytest
from config import (
    AuthConfig,
    Config,
    GeneratorConfig,
    ServerConfig,
    LoggingConfig,
    load_config,
)


class TestGeneratorConfig:
    """Tests for GeneratorConfig class."""

    def test_default_values(self):
        """GeneratorConfig has sensible defaults."""
        config = GeneratorConfig()
        assert config.max_batch == 1000
        assert config.seed is None

    def test_custom_values(self):
        config = GeneratorConfig(max_batch=10, seed=7)
        assert config.max_batch == 10
        assert config.seed == 7


class TestServerConfig:
    """Tests for ServerConfig class."""

    def test_default_values(self):
        """ServerConfig has sensible defaults."""
        config = ServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8080

    def test_custom_values(self):
        config = ServerConfig(host="0.0.0.0", port=9000)
        assert config.host == "0.0.0.0"
        assert config.port == 9000


class TestAuthConfig:
    """Tests for AuthConfig class."""

    def test_default_values(self, monkeypatch):
        monkeypatch.delenv("API_USERNAME", raising=False)
        monkeypatch.delenv("API_PASSWORD", raising=False)
        config = AuthConfig()
        assert config.username == "admin"
        assert config.password == "admin123"

    def test_environment_overrides(self, monkeypatch):
        """Environment variables win over configured values."""
        monkeypatch.setenv("API_USERNAME", "ops")
        monkeypatch.setenv("API_PASSWORD", "s3cret")
        config = AuthConfig(username="ignored", password="ignored")
        assert config.username == "ops"
        assert config.password == "s3cret"


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_values(self):
        """LoggingConfig has sensible defaults."""
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.file == "logs/ksuid.log"
        assert config.crash_file == "logs/crash.log"

    def test_custom_values(self):
        config = LoggingConfig(level="DEBUG", file="/var/log/ksuid.log", crash_file="/var/log/crash.log")
        assert config.level == "DEBUG"
        assert config.file == "/var/log/ksuid.log"
        assert config.crash_file == "/var/log/crash.log"


class TestConfig:
    """Tests for main Config class."""

    def test_default_config(self):
        """Config creates default sub-configs."""
        config = Config()
        assert isinstance(config.generator, GeneratorConfig)
        assert isinstance(config.server, ServerConfig)
        assert isinstance(config.auth, AuthConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_from_dict(self):
        """Config.from_dict parses dictionary."""
        data = {
            "generator": {"max_batch": 5, "seed": 1},
            "server": {"port": 9000},
            "logging": {"level": "DEBUG"},
        }
        config = Config.from_dict(data)
        assert config.generator.max_batch == 5
        assert config.generator.seed == 1
        assert config.server.port == 9000
        assert config.logging.level == "DEBUG"

    def test_from_dict_partial(self):
        """Config.from_dict handles partial data."""
        config = Config.from_dict({"generator": {"max_batch": 5}})
        assert config.generator.max_batch == 5
        assert config.server.port == 8080  # Default

    def test_from_dict_unknown_key(self):
        with pytest.raises(TypeError):
            Config.from_dict({"generator": {"batch": 5}})


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_returns_config(self):
        assert isinstance(load_config(), Config)

    def test_load_config_reads_file(self):
        """load_config reads from config.json."""
        config = load_config()
        assert config.generator.max_batch == 500
        assert config.logging.file == "logs/ksuid.log"

    def test_load_config_custom_path(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"server": {"port": 9999}}))
        assert load_config(path).server.port == 9999

    def test_load_config_missing_file(self, tmp_path):
        """load_config returns defaults for missing file."""
        config = load_config(tmp_path / "nonexistent.json")
        assert isinstance(config, Config)
        assert config.generator.max_batch == 1000  # Default
