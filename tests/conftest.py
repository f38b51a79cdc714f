"""Pytest fixtures for all tests."""

import base64

import pytest
from httpx import AsyncClient, ASGITransport

from config import AuthConfig, Config, GeneratorConfig, LoggingConfig
from internal.logging import AsyncFileLogger
from service.generator import KSUIDGenerator
from ui.app import create_app


class CountingRandomSource:
    """Deterministic source returning seed+1, seed+2, ..."""

    def __init__(self, seed):
        self.state = seed

    def next(self):
        self.state += 1
        return self.state


@pytest.fixture
def counting_source():
    return CountingRandomSource(123_456)


@pytest.fixture
def zero_bytes():
    return bytes(20)


@pytest.fixture
def max_bytes():
    return b"\xff" * 20


@pytest.fixture
def sample_bytes():
    """Reference vector encoding to 0ujtsYcgvSTl8PAuAdqWYSMnLOv."""
    return base64.b64decode("Bmn377WhzTS1+Z0RVPtoUzRclzU=")


@pytest.fixture
def gen_config():
    return GeneratorConfig(max_batch=10)


@pytest.fixture
def audit(tmp_path):
    return AsyncFileLogger(file_path=str(tmp_path / "audit.log"), queue_size=20)


@pytest.fixture
def generator(gen_config, counting_source, audit):
    return KSUIDGenerator(config=gen_config, random_source=counting_source,
                          clock=lambda: 1_621_627_443.5, audit=audit)


@pytest.fixture
def app_config(tmp_path):
    auth = AuthConfig()
    auth.username, auth.password = "admin", "admin123"
    return Config(
        generator=GeneratorConfig(max_batch=50),
        auth=auth,
        logging=LoggingConfig(level="ERROR", file=str(tmp_path / "ksuid.log"),
                              crash_file=str(tmp_path / "crash.log")),
    )


@pytest.fixture
async def app(app_config):
    """Create test FastAPI app."""
    return create_app(app_config)


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
