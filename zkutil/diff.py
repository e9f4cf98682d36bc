"""Compare two sorted listings of files and report the changes."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from zkutil.paths import Metadata


class DiffKind(Enum):
    """The kind of change made to a file."""

    ADDED = 1
    MODIFIED = 2
    REMOVED = 3
    UNCHANGED = 4

    def __str__(self) -> str:
        return self.name.lower()

    def symbol(self) -> str:
        """A single character representing the change."""
        return _SYMBOLS[self]


_SYMBOLS = {
    DiffKind.ADDED: "+",
    DiffKind.MODIFIED: "~",
    DiffKind.REMOVED: "-",
    DiffKind.UNCHANGED: "/",
}


@dataclass(frozen=True)
class DiffChange:
    """A change made to the file at ``path``."""

    path: str
    kind: DiffKind

    def __str__(self) -> str:
        return f"{self.kind} {self.path}"


def diff(
    source: Iterable[Metadata],
    target: Iterable[Metadata],
    force_modified: bool,
    callback: Callable[[DiffChange], None],
) -> int:
    """Report to ``callback`` how ``target`` must change to match ``source``.

    Both listings must be sorted by path. Files present in both are compared
    by modification date, unless ``force_modified`` marks them all modified.
    An exception raised by ``callback`` stops the comparison.
    Returns the number of files read from ``source``.
    """
    sources = iter(source)
    targets = iter(target)
    source_open = target_open = True
    current_source: Metadata | None = None
    current_target: Metadata | None = None
    count = 0

    while source_open or target_open:
        if current_source is None and source_open:
            current_source = next(sources, None)
            if current_source is None:
                source_open = False
            else:
                count += 1
        if current_target is None and target_open:
            current_target = next(targets, None)
            if current_target is None:
                target_open = False

        if current_source is None and current_target is None:
            continue
        if current_source is None:
            change = DiffChange(current_target.path, DiffKind.REMOVED)
            current_target = None
        elif current_target is None:
            change = DiffChange(current_source.path, DiffKind.ADDED)
            current_source = None
        elif current_source.path == current_target.path:
            modified = force_modified or current_source.modified != current_target.modified
            kind = DiffKind.MODIFIED if modified else DiffKind.UNCHANGED
            change = DiffChange(current_source.path, kind)
            current_source = current_target = None
        elif current_source.path < current_target.path:
            change = DiffChange(current_source.path, DiffKind.ADDED)
            current_source = None
        else:
            change = DiffChange(current_target.path, DiffKind.REMOVED)
            current_target = None
        callback(change)

    return count