import json
import os
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class GeneratorConfig:
    __slots__ = ("max_batch", "seed")

    def __init__(self, max_batch=1000, seed=None):
        self.max_batch = max_batch
        self.seed = seed


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class AuthConfig:
    __slots__ = ("username", "password")

    def __init__(self, username="admin", password="admin123"):
        # Environment wins so credentials can stay out of config.json
        self.username = os.environ.get("API_USERNAME", username)
        self.password = os.environ.get("API_PASSWORD", password)


class LoggingConfig:
    __slots__ = ("level", "file", "crash_file")

    def __init__(self, level="INFO", file="logs/ksuid.log", crash_file="logs/crash.log"):
        self.level = level
        self.file = file
        self.crash_file = crash_file


class Config:
    __slots__ = ("generator", "server", "auth", "logging")

    def __init__(self, generator=None, server=None, auth=None, logging=None):
        self.generator = generator or GeneratorConfig()
        self.server = server or ServerConfig()
        self.auth = auth or AuthConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GeneratorConfig(**d.get("generator", {})),
            ServerConfig(**d.get("server", {})),
            AuthConfig(**d.get("auth", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
