"""Path helpers: file classification, tilde expansion and relative links."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from repolink.core.errors import NoCommonAncestorError, UnsupportedFileTypeError
from repolink.core.models import FileKind

logger = logging.getLogger(__name__)


def classify(path: str | os.PathLike) -> FileKind:
    """Report what kind of entry *path* is, without following symlinks.

    A symlink is always reported as FileKind.SYMLINK, even when dangling.

    Raises:
        OSError: If the entry's metadata cannot be read.
        UnsupportedFileTypeError: For sockets, devices and FIFOs.
    """
    mode = Path(path).lstat().st_mode
    if stat.S_ISLNK(mode):
        return FileKind.SYMLINK
    if stat.S_ISDIR(mode):
        return FileKind.DIRECTORY
    if stat.S_ISREG(mode):
        return FileKind.REGULAR_FILE
    raise UnsupportedFileTypeError(path)


def _home_dir() -> Path | None:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def expand_tilde(path: str | os.PathLike) -> Path | None:
    """Replace a leading ``~`` component with the current user's home directory.

    ``~bob/...`` is returned unchanged. Returns None when the path needs
    the home directory and it cannot be determined.
    """
    path = Path(path)
    if not path.parts or path.parts[0] != "~":
        return path

    home = _home_dir()
    if home is None:
        return None
    return home.joinpath(*path.parts[1:])


def to_absolute(path: str | os.PathLike, base: str | os.PathLike | None = None) -> Path:
    """Anchor a relative path at *base* (default: the working directory).

    Purely lexical: nothing is resolved or required to exist.
    """
    path = Path(path)
    if path.is_absolute():
        return path
    if base is None:
        base = Path.cwd()
    return Path(base) / path


def relative_path_from(base: str | os.PathLike, target: str | os.PathLike) -> Path:
    """Compute the path that leads from directory *base* to *target*.

    Both paths are canonicalized first, so they must exist. Walks up from
    *base* one parent at a time until it is a prefix of *target*, emitting
    one ``..`` per step. Identical paths give ``Path(".")``.

    Raises:
        OSError: If either path cannot be resolved.
        NoCommonAncestorError: If no ancestor of *base* prefixes *target*.
    """
    ancestor = Path(base).resolve(strict=True)
    target = Path(target).resolve(strict=True)

    count = 0
    while not target.is_relative_to(ancestor):
        parent = ancestor.parent
        if parent == ancestor:  # reached the root
            raise NoCommonAncestorError(base, target)
        ancestor = parent
        count += 1

    relpath = Path(*([".."] * count)) / target.relative_to(ancestor)
    logger.debug("relative path from %s to %s: %s", base, target, relpath)
    return relpath
