from __future__ import annotations

import pytest

from lrcphile.platform.lrclib.http_client import LrclibHTTPClient
from lrcphile.platform.lrclib.user_agent import format_user_agent, resolve_user_agent


def test_format_user_agent_with_homepage() -> None:
    assert format_user_agent("app", "1.2.3", "https://example.com") == "app v1.2.3 (https://example.com)"


def test_format_user_agent_without_homepage() -> None:
    assert format_user_agent("app", "1.2.3", " ") == "app v1.2.3"


def test_default_user_agent(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LRCPHILE_USER_AGENT", raising=False)

    assert resolve_user_agent() == "lrcphile v0.1.0 (https://github.com/khalil-cheddadi/lrcphile)"
    assert LrclibHTTPClient().user_agent == resolve_user_agent()


def test_user_agent_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LRCPHILE_USER_AGENT", "  custom/1.0  ")

    assert resolve_user_agent() == "custom/1.0"
