"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator, Iterable
from httpx import ASGITransport, AsyncClient

from config import Config
from shortlink.registry import Registry
from shortlink.shortcode import ShortCodeGenerator
from shortlink.common.logging_config import setup_logging
from web_app import create_app


class ScriptedRandom:
    """Random source that hands out predetermined codes, one per ``choices`` call."""

    def __init__(self, codes: Iterable[str]):
        self.codes = list(codes)
        self.calls = 0

    def choices(self, population, k):
        code = self.codes[self.calls]
        self.calls += 1
        assert len(code) == k
        assert all(c in population for c in code)
        return list(code)


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=6)


@pytest.fixture
def scripted_generator():
    """Factory for generators that produce the given codes in order."""
    def _make(*codes: str) -> ShortCodeGenerator:
        return ShortCodeGenerator(default_length=len(codes[0]), rng=ScriptedRandom(codes))
    return _make


@pytest.fixture
def registry(short_code_generator, logger) -> Registry:
    """Create an empty registry."""
    return Registry(short_code_generator=short_code_generator, logger=logger)


@pytest.fixture
def config() -> Config:
    """Test configuration."""
    return Config(base_url="http://testserver")


@pytest.fixture
def app(registry, config):
    """Create test FastAPI app."""
    return create_app(registry=registry, config=config)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
