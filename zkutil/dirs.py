"""Resolve the notebook and working directories from command-line flags."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Dirs:
    """The notebook directory and the directory commands run from."""

    notebook_dir: str = ""
    working_dir: str = ""


def _find_flag(long: str, short: str, args: list[str]) -> tuple[str, list[str]]:
    def matches(arg: str) -> bool:
        return arg == long or (short != "" and arg == short)

    remaining: list[str] = []
    for i, arg in enumerate(args):
        # Accept both "--flag value" and "--flag=value".
        name, separator, rest = arg.partition("=")
        option = value = ""
        if separator and matches(name):
            option, value = name, rest
            remaining.extend(args[i + 1:])
        elif i + 1 < len(args) and matches(arg):
            option, value = arg, args[i + 1]
            remaining.extend(args[i + 2:])
        else:
            remaining.append(arg)

        if option and value:
            return os.path.abspath(value), remaining
        if option:
            raise ValueError(f"{option} requires a path argument")
        if i == len(args) - 1 and matches(arg):
            raise ValueError(f"{arg} requires a path argument")
    return "", remaining


def parse_dirs(args: list[str]) -> tuple[Dirs, list[str]]:
    """Extract ``--notebook-dir`` and ``--working-dir``/``-W`` from ``args``.

    Returns the directories and the remaining arguments.
    """
    notebook_dir, args = _find_flag("--notebook-dir", "", list(args))
    working_dir, args = _find_flag("--working-dir", "-W", args)
    return Dirs(notebook_dir=notebook_dir, working_dir=working_dir), args


def notebook_search_dirs(dirs: Dirs) -> list[Dirs]:
    """Return the candidate notebook locations, by order of precedence.

    An explicit notebook directory is the only candidate. Otherwise the
    working directory comes first, then ``ZK_NOTEBOOK_DIR`` if it is set.
    """
    cwd = os.getcwd()

    if dirs.notebook_dir:
        return [replace(dirs, working_dir=dirs.working_dir or cwd)]

    working_dir = dirs.working_dir or cwd
    candidates = [Dirs(notebook_dir=working_dir, working_dir=working_dir)]

    notebook_dir = os.environ.get("ZK_NOTEBOOK_DIR")
    if notebook_dir is not None:
        candidates.append(
            Dirs(notebook_dir=notebook_dir, working_dir=dirs.working_dir or notebook_dir)
        )
    return candidates