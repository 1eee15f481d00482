from repolink.core.adder import add_file, add_files
from repolink.core.config import load_config
from repolink.core.errors import (
    AlreadyInRepositoryError,
    ConfigError,
    NoCommonAncestorError,
    RepolinkError,
    UnsupportedFileTypeError,
)
from repolink.core.models import AddResult, Config, FileKind, LinkedFile, SkippedItem
from repolink.core.paths import classify, expand_tilde, relative_path_from, to_absolute

__all__ = [
    "AlreadyInRepositoryError",
    "add_file",
    "add_files",
    "load_config",
    "ConfigError",
    "NoCommonAncestorError",
    "RepolinkError",
    "UnsupportedFileTypeError",
    "AddResult",
    "Config",
    "FileKind",
    "LinkedFile",
    "SkippedItem",
    "classify",
    "expand_tilde",
    "relative_path_from",
    "to_absolute",
]
