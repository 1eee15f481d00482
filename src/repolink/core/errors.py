from __future__ import annotations


class RepolinkError(Exception):
    """Base class for errors raised by repolink itself.

    Filesystem failures are not wrapped; they propagate as OSError.
    """


class ConfigError(RepolinkError):
    """The config file could not be located, read or parsed."""


class NoCommonAncestorError(RepolinkError):
    """Two paths share no prefix, e.g. they live on different drives."""

    def __init__(self, base, target):
        super().__init__(f"{base} and {target} have no common ancestor")
        self.base = base
        self.target = target


class UnsupportedFileTypeError(RepolinkError):
    """Entry is neither a regular file, a directory nor a symlink."""

    def __init__(self, path):
        super().__init__(f"{path} is not a regular file, directory or symlink")
        self.path = path


class AlreadyInRepositoryError(RepolinkError):
    """The file already lives directly in the repository directory."""

    def __init__(self, path):
        super().__init__(f"{path} is already in the repository")
        self.path = path
