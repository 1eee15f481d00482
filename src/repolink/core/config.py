"""Locate and load repolink.toml."""

from __future__ import annotations

import os
import sys
import tomllib
from pathlib import Path

from repolink.core.errors import ConfigError
from repolink.core.models import Config
from repolink.core.paths import expand_tilde, to_absolute

CONFIG_FILE_NAME = "repolink.toml"


def user_config_dir() -> Path | None:
    """Return the platform's per-user config directory, or None if unknown.

    Linux/BSD:  $XDG_CONFIG_HOME, falling back to ~/.config
    macOS:      ~/Library/Application Support
    Windows:    %APPDATA%
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else None

    home = expand_tilde("~")
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" if home else None

    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return home / ".config" if home else None


def default_config_path() -> Path:
    config_dir = user_config_dir()
    if config_dir is None:
        raise ConfigError("Failed to obtain the user's config directory")
    return config_dir / CONFIG_FILE_NAME


def parse_config(text: str, source: Path | None = None) -> Config:
    """Build a Config from TOML text.

    A relative repo_dir is anchored at the directory holding *source*.
    """
    label = source or "<config>"
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{label}: invalid TOML: {e}") from e

    repo_dir = raw.get("repo_dir")
    if repo_dir is None:
        raise ConfigError(f"{label}: missing required key 'repo_dir'")
    if not isinstance(repo_dir, str) or not repo_dir.strip():
        raise ConfigError(f"{label}: 'repo_dir' must be a non-empty string")

    expanded = expand_tilde(repo_dir)
    if expanded is None:
        raise ConfigError(f"{label}: cannot expand {repo_dir!r}, home directory unknown")

    base = source.parent if source is not None else None
    return Config(repo_dir=to_absolute(expanded, base), source=source)


def load_config(path: Path | None = None) -> Config:
    """Read the config file at *path*, or at the default location.

    Raises:
        ConfigError: On any failure to locate, read or parse the file.
    """
    if path is None:
        path = default_config_path()
    else:
        path = to_absolute(expand_tilde(path) or path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    return parse_config(text, source=path)
