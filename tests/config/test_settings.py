"""Tests for config-derived runtime settings."""

import pytest

from lrcphile.config.config import Config
from lrcphile.config.settings import (
    DEFAULT_CONCURRENCY_LIMIT,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SERVICE_URL,
    resolve_concurrency_limit,
    resolve_request_timeout,
    resolve_service_url,
)


def test_service_url_precedence() -> None:
    config = Config(service_url="https://configured.example/")

    assert resolve_service_url(Config()) == DEFAULT_SERVICE_URL
    assert resolve_service_url(config) == "https://configured.example"
    assert resolve_service_url(config, "https://flag.example//") == "https://flag.example"
    assert resolve_service_url(config, "  ") == "https://configured.example"


@pytest.mark.parametrize(
    ("configured", "override", "expected"),
    [
        (None, None, DEFAULT_CONCURRENCY_LIMIT),
        (8, None, 8),
        (8, 2, 2),
        (0, None, DEFAULT_CONCURRENCY_LIMIT),
        (-3, None, DEFAULT_CONCURRENCY_LIMIT),
    ],
)
def test_concurrency_limit(configured: int | None, override: int | None, expected: int) -> None:
    assert resolve_concurrency_limit(Config(concurrency_limit=configured), override) == expected


def test_request_timeout_validation() -> None:
    assert resolve_request_timeout(Config()) == DEFAULT_REQUEST_TIMEOUT
    assert resolve_request_timeout(Config(request_timeout=2)) == 2.0
    assert resolve_request_timeout(Config(request_timeout=-1.0)) == DEFAULT_REQUEST_TIMEOUT
