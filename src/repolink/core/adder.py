from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from pathlib import Path

from repolink.core.errors import AlreadyInRepositoryError
from repolink.core.models import AddResult, Config, FileKind, LinkedFile, SkippedItem
from repolink.core.paths import classify, relative_path_from

logger = logging.getLogger(__name__)


def add_file(path: Path, config: Config) -> LinkedFile:
    """Move one regular file into the repository and symlink it back.

    An existing file of the same name in the repository is overwritten.

    Raises:
        AlreadyInRepositoryError: If *path* already is that destination.
    """
    source = path.resolve(strict=True)
    destination = config.repo_dir / source.name
    if destination.resolve() == source:
        raise AlreadyInRepositoryError(source)

    config.repo_dir.mkdir(parents=True, exist_ok=True)
    logger.debug("moving %s -> %s", source, destination)
    os.rename(source, destination)

    link_target = relative_path_from(source.parent, destination)
    source.symlink_to(link_target)
    logger.debug("linked %s -> %s", source, link_target)

    return LinkedFile(source=source, destination=destination, link_target=link_target)


def add_files(
    paths: Iterable[str | os.PathLike],
    config: Config,
    on_linked: Callable[[LinkedFile], None] | None = None,
) -> AddResult:
    """Move each regular file in *paths* into ``config.repo_dir``.

    Directories and symlinks are skipped and recorded in the result; the
    batch carries on past them. Any OSError stops the batch where it
    happened. Files moved before the failure stay moved.

    *on_linked* is called after each file is linked, so callers can report
    progress that survives a later failure.
    """
    result = AddResult()

    for p in paths:
        path = Path(p)
        kind = classify(path)
        logger.debug("%s is a %s", path, kind.value)
        if kind is not FileKind.REGULAR_FILE:
            result.skipped.append(SkippedItem(path=path, reason=kind.value))
            continue

        linked = add_file(path, config)
        result.linked.append(linked)
        if on_linked is not None:
            on_linked(linked)

    return result
