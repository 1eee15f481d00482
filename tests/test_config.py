from __future__ import annotations

import sys
from pathlib import Path

import pytest

import repolink.core.config as config_module
from repolink.core.config import (
    CONFIG_FILE_NAME,
    default_config_path,
    load_config,
    parse_config,
    user_config_dir,
)
from repolink.core.errors import ConfigError

linux_only = pytest.mark.skipif(
    not sys.platform.startswith("linux"), reason="XDG layout is Linux-specific"
)


@linux_only
def test_user_config_dir_prefers_xdg(home, monkeypatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", "/etc/xdg-test")
    assert user_config_dir() == Path("/etc/xdg-test")


@linux_only
def test_user_config_dir_ignores_relative_xdg(home, monkeypatch) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", "relative/config")
    assert user_config_dir() == home / ".config"


@linux_only
def test_default_config_path(home, monkeypatch) -> None:
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    assert default_config_path() == home / ".config" / CONFIG_FILE_NAME


def test_default_config_path_without_config_dir(monkeypatch) -> None:
    monkeypatch.setattr(config_module, "user_config_dir", lambda: None)

    with pytest.raises(ConfigError, match="config directory"):
        default_config_path()


def test_load_config_from_default_location(home, monkeypatch) -> None:
    config_dir = home / "config"
    config_dir.mkdir()
    (config_dir / CONFIG_FILE_NAME).write_text('repo_dir = "/srv/dotfiles"\n')
    monkeypatch.setattr(config_module, "user_config_dir", lambda: config_dir)

    config = load_config()

    assert config.repo_dir == Path("/srv/dotfiles")
    assert config.source == config_dir / CONFIG_FILE_NAME


def test_load_config_expands_tilde(home, tmp_path) -> None:
    path = tmp_path / "repolink.toml"
    path.write_text('repo_dir = "~/dotfiles"\n')

    assert load_config(path).repo_dir == home / "dotfiles"


def test_relative_repo_dir_is_anchored_at_config_file(tmp_path) -> None:
    path = tmp_path / "conf" / "repolink.toml"
    path.parent.mkdir()
    path.write_text('repo_dir = "dotfiles"\n')

    assert load_config(path).repo_dir == tmp_path / "conf" / "dotfiles"


def test_unknown_keys_are_ignored() -> None:
    config = parse_config('repo_dir = "/repo"\ncolor = "always"\n')
    assert config.repo_dir == Path("/repo")
    assert config.source is None


def test_missing_config_file(tmp_path) -> None:
    with pytest.raises(ConfigError, match="Cannot read config file"):
        load_config(tmp_path / "nope.toml")


def test_invalid_toml(tmp_path) -> None:
    path = tmp_path / "repolink.toml"
    path.write_text("repo_dir = \n")

    with pytest.raises(ConfigError, match="invalid TOML"):
        load_config(path)


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "missing required key 'repo_dir'"),
        ("repo_dir = 3\n", "must be a non-empty string"),
        ('repo_dir = ""\n', "must be a non-empty string"),
    ],
)
def test_bad_repo_dir(text, message) -> None:
    with pytest.raises(ConfigError, match=message):
        parse_config(text)


def test_unexpandable_repo_dir(monkeypatch) -> None:
    import repolink.core.paths as paths_module

    monkeypatch.setattr(paths_module, "_home_dir", lambda: None)

    with pytest.raises(ConfigError, match="home directory unknown"):
        parse_config('repo_dir = "~/dotfiles"\n')
