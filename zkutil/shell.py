"""Build shell command lines suitable for :mod:`subprocess`."""

from __future__ import annotations

import sys

from zkutil.env import get_opt_env


def command_from_string(command: str, *args: str) -> list[str] | str:
    """Return a command running ``command`` through the user's shell.

    On POSIX systems the shell is taken from ``ZK_SHELL``, then ``SHELL``,
    falling back to ``sh``; extra ``args`` become positional parameters.
    On Windows a ``cmd`` command line is returned.
    """
    if sys.platform == "win32":
        return f'cmd /v:on/s/c "{command} {" ".join(args)}"'

    shell = get_opt_env("ZK_SHELL").or_(get_opt_env("SHELL")).or_string("sh").unwrap()
    return [shell, "-c", command, "--", *args]