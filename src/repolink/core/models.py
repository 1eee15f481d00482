from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


class FileKind(enum.Enum):
    REGULAR_FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"


@dataclass(frozen=True)
class Config:
    """Settings read from repolink.toml."""

    repo_dir: Path  # Absolute, tilde already expanded
    source: Path | None = None  # Config file it was loaded from


@dataclass
class SkippedItem:
    """An input that was rejected and left untouched."""

    path: Path
    reason: str  # FileKind value, e.g. "directory"


@dataclass
class LinkedFile:
    """A file moved into the repository with a symlink left in its place."""

    source: Path  # Canonical original location, now a symlink
    destination: Path  # New location inside the repository
    link_target: Path  # Relative path stored in the symlink


@dataclass
class AddResult:
    linked: list[LinkedFile] = field(default_factory=list)
    skipped: list[SkippedItem] = field(default_factory=list)

    @property
    def summary(self) -> str:
        """e.g. '2 files linked, 1 skipped'"""
        n = len(self.linked)
        return f"{n} file{'s' if n != 1 else ''} linked, {len(self.skipped)} skipped"
