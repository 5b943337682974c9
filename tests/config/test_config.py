"""Test configuration management."""

from collections.abc import Iterator
from pathlib import Path

import pytest
import tomllib

from lrcphile.config.config import Config
from lrcphile.config.paths import default_config_path


@pytest.fixture
def repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Force portable repo root to a temporary directory for isolation."""
    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")
    import lrcphile.config.paths as p

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(p, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv("LRCPHILE_CONFIG", raising=False)
    Config.reset()
    yield tmp_path
    Config.reset()


def _write_config(root: Path, body: str) -> Path:
    target = root / "config" / "config.toml"
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text(body, encoding="utf-8")
    return target


def test_missing_file_gives_defaults_without_writing(repo_root: Path) -> None:
    config = Config.load()

    assert config.music_dir is None
    assert config.log_file is None
    assert config.service_url is None
    assert config.concurrency_limit is None
    assert not default_config_path().exists()
    assert not (repo_root / "config").exists()


def test_load_reads_all_keys(repo_root: Path) -> None:
    _ = _write_config(
        repo_root,
        'music_dir = "/srv/music"\n'
        'log_file = ""\n'
        'service_url = "https://lyrics.example/"\n'
        "concurrency_limit = 8\n"
        "request_timeout = 4.5\n",
    )

    config = Config.load()

    assert config.music_dir == Path("/srv/music")
    assert config.log_file is None
    assert config.service_url == "https://lyrics.example/"
    assert config.concurrency_limit == 8
    assert config.request_timeout == 4.5


def test_load_is_cached_until_reset(repo_root: Path) -> None:
    first = Config.load()
    _ = _write_config(repo_root, "concurrency_limit = 2\n")

    assert Config.load() is first

    Config.reset()
    assert Config.load().concurrency_limit == 2


def test_unknown_keys_are_ignored(repo_root: Path) -> None:
    _ = _write_config(repo_root, 'base_path = "/old"\nconcurrency_limit = 3\n')

    config = Config.load()

    assert config.concurrency_limit == 3
    assert not hasattr(config, "base_path")


def test_invalid_toml_raises(repo_root: Path) -> None:
    _ = _write_config(repo_root, "concurrency_limit = = 3\n")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()


def test_explicit_file_is_not_cached(repo_root: Path, tmp_path: Path) -> None:
    explicit = tmp_path / "other.toml"
    _ = explicit.write_text('service_url = "https://a.example"\n', encoding="utf-8")

    config = Config.load(explicit)

    assert config.service_url == "https://a.example"
    assert Config.load() is not config


def test_env_var_selects_config_file(
    repo_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _ = repo_root
    custom = tmp_path / "elsewhere.toml"
    _ = custom.write_text("concurrency_limit = 6\n", encoding="utf-8")
    monkeypatch.setenv("LRCPHILE_CONFIG", str(custom))

    assert Config.load().concurrency_limit == 6
