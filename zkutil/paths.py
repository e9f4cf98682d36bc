"""File system path helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime

_SEPARATORS = os.sep + (os.altsep or "")


@dataclass(frozen=True)
class Metadata:
    """A file path and its last modification date."""

    path: str
    modified: datetime


def _stat(path: str) -> os.stat_result | None:
    try:
        return os.stat(path)
    except FileNotFoundError:
        return None


def exists(path: str) -> bool:
    """Whether ``path`` exists; errors other than "not found" are raised."""
    return _stat(path) is not None


def dir_exists(path: str) -> bool:
    """Whether ``path`` exists and is a directory."""
    info = _stat(path)
    return info is not None and os.path.stat.S_ISDIR(info.st_mode)


def _extension(path: str) -> str:
    last_separator = max(path.rfind(sep) for sep in _SEPARATORS)
    dot = path.rfind(".")
    return path[dot:] if dot > last_separator else ""


def _base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip(_SEPARATORS)
    if not stripped:
        return os.sep
    return os.path.basename(stripped)


def drop_ext(path: str) -> str:
    """Return ``path`` without its file extension."""
    ext = _extension(path)
    return path[: -len(ext)] if ext else path


def filename_stem(path: str) -> str:
    """Return the file name of ``path`` without its extension."""
    return _base(drop_ext(path))


def write_string(path: str, content: str) -> None:
    """Write ``content`` to a new file, creating parent directories as needed."""
    directory = os.path.dirname(path)
    if directory:
        directory = os.path.normpath(directory)
        if directory not in (".", ".."):
            os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def expand_tilde(path: str) -> str:
    """Expand a leading ``~`` into the current user's home directory."""
    home = os.path.expanduser("~")
    if home == "~":
        raise OSError("failed to determine current user")
    if path == "~":
        return home
    if path.startswith("~/"):
        return os.path.normpath(os.path.join(home, path[2:]))
    return path