"""Walk a notebook directory and list its files."""

from __future__ import annotations

import os
import stat
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone

from zkutil.logger import Logger
from zkutil.paths import Metadata

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _modified(info: os.stat_result) -> datetime:
    return _EPOCH + timedelta(microseconds=info.st_mtime_ns // 1000)


def walk(
    base_path: str,
    logger: Logger,
    notebook_root: str,
    should_ignore_path: Callable[[str], bool],
) -> Iterator[Metadata]:
    """Yield the metadata of each file under ``base_path``, in lexical order.

    Hidden files and directories are skipped, except a directory named
    ``notebook_root``. Files for which ``should_ignore_path`` returns true are
    skipped; paths are relative to ``base_path``. Errors are logged.
    """

    def visit(path: str, name: str, info: os.stat_result) -> Iterator[Metadata]:
        is_hidden = name.startswith(".")
        if stat.S_ISDIR(info.st_mode):
            if is_hidden and name != notebook_root:
                return
            for child in sorted(os.listdir(path)):
                child_path = os.path.join(path, child)
                yield from visit(child_path, child, os.lstat(child_path))
            return

        try:
            relative = os.path.relpath(path, base_path)
        except ValueError as exc:
            logger.println(exc)
            return
        try:
            ignored = should_ignore_path(relative)
        except Exception as exc:  # the predicate is caller supplied
            logger.println(exc)
            return
        if is_hidden or ignored:
            return
        yield Metadata(path=relative, modified=_modified(info))

    try:
        root_name = os.path.basename(os.path.normpath(base_path))
        yield from visit(base_path, root_name, os.lstat(base_path))
    except OSError as exc:
        logger.println(exc)