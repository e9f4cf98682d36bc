"""Write text to the terminal through the user's pager."""

from __future__ import annotations

import shlex
import shutil
import subprocess
import sys
from typing import TextIO

from zkutil.env import get_opt_env
from zkutil.errors import WrappedError
from zkutil.logger import Logger, NullLogger
from zkutil.opt import OptString
from zkutil.shell import command_from_string

_FAILURE = (
    "failed to paginate the output, try again with --no-pager "
    "or fix your PAGER environment variable"
)

_DEFAULT_PAGERS = ("less -FIRX", "more -R")


class Pager:
    """A text sink feeding a pager process, or standard output directly."""

    def __init__(
        self,
        stream: TextIO | None = None,
        process: subprocess.Popen | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._stream = stream
        self._process = process
        self._logger = logger if logger is not None else NullLogger()
        self._closed = False

    @property
    def stream(self) -> TextIO:
        if self._stream is not None:
            return self._stream
        if self._process is not None and self._process.stdin is not None:
            return self._process.stdin
        return sys.stdout

    def write(self, text: str) -> None:
        """Send ``text`` to the pager."""
        self.stream.write(text)

    def write_string(self, text: str) -> None:
        """Send ``text`` to the pager, followed by a newline."""
        self.write(text + "\n")

    def close(self) -> None:
        """Finish the output and wait for the pager process to exit.

        A failing pager is reported to the logger and ends the program.
        """
        if self._process is None or self._closed:
            return
        self._closed = True
        if self._process.stdin is not None:
            try:
                self._process.stdin.close()
            except BrokenPipeError:
                pass
        returncode = self._process.wait()
        if returncode != 0:
            cause = subprocess.CalledProcessError(returncode, self._process.args)
            self._logger.err(WrappedError(_FAILURE, cause))
            raise SystemExit(1)

    def __enter__(self) -> Pager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_pager(pager_cmd: OptString, logger: Logger) -> Pager:
    """Start the pager selected from the environment and ``pager_cmd``.

    Without any pager available, the returned pager writes to standard output.
    """
    command = select_pager_cmd(pager_cmd)
    if command.is_null():
        return Pager(logger=logger)
    try:
        process = subprocess.Popen(
            command_from_string(str(command)),
            stdin=subprocess.PIPE,
            text=True,
        )
    except OSError as exc:
        raise WrappedError(_FAILURE, exc)
    return Pager(process=process, logger=logger)


def select_pager_cmd(user_pager: OptString) -> OptString:
    """Pick the pager: ``ZK_PAGER``, the configured one, ``PAGER``, then a default."""
    return (
        get_opt_env("ZK_PAGER")
        .or_(user_pager)
        .or_(get_opt_env("PAGER"))
        .or_(select_default_pager())
    )


def select_default_pager() -> OptString:
    """Return the first default pager found on the executable path."""
    for pager in _DEFAULT_PAGERS:
        try:
            parts = shlex.split(pager)
        except ValueError:
            continue
        executable = shutil.which(parts[0])
        if executable is not None:
            return OptString.not_empty(" ".join([executable, *parts[1:]]))
    return OptString()