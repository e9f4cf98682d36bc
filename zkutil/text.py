"""String helpers."""

from __future__ import annotations

import re
from collections.abc import Iterable
from urllib.parse import urlsplit

_MAX_LINE_LENGTH = 2048 * 1024
_WORD_RE = re.compile(r"[^ \t\n\f\r,;\[\]\"']+")


def prepend(text: str, prefix: str) -> str:
    """Prefix each line of ``text`` with ``prefix``."""
    if not text or not prefix:
        return text
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return "".join(prefix + line for line in lines)


def pluralize(word: str, count: int) -> str:
    """Add an ``s`` to ``word`` unless ``count`` is between -1 and 1."""
    if not word or -1 <= count <= 1:
        return word
    return word + "s"


def split_lines(s: str) -> list[str]:
    """Split ``s`` into lines, accepting both LF and CRLF endings."""
    if not s:
        return []
    parts = s.split("\n")
    if s.endswith("\n"):
        parts.pop()
    lines = [part.removesuffix("\r") for part in parts]
    for line in lines:
        if len(line.encode("utf-8")) > _MAX_LINE_LENGTH:
            raise ValueError("error while scanning text: token too long")
    return lines


def join_lines(s: str) -> str:
    """Replace the newlines of ``s`` with single spaces."""
    return " ".join(split_lines(s))


def join_ints(ints: Iterable[int], delimiter: str) -> str:
    """Join integers into a string with ``delimiter``."""
    return delimiter.join(str(i) for i in ints)


def is_url(s: str) -> bool:
    """Whether ``s`` is an absolute URL with a scheme and a host."""
    try:
        parts = urlsplit(s)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def remove_duplicates(items: list[str] | None) -> list[str] | None:
    """Keep the first occurrence of each string, in order."""
    if items is None:
        return None
    return list(dict.fromkeys(items))


def remove_blank(items: list[str] | None) -> list[str] | None:
    """Keep only the strings that are not blank."""
    if items is None:
        return None
    return [item for item in items if item.strip()]


def expand_whitespace_literals(s: str) -> str:
    r"""Turn literal ``\n`` and ``\t`` sequences into the actual characters."""
    return s.replace("\\n", "\n").replace("\\t", "\t")


def contains(items: Iterable[str], s: str) -> bool:
    """Whether ``items`` contains ``s``."""
    return s in items


def word_at(s: str, index: int) -> str:
    """Return the word found at the given character position, or ``""``."""
    for match in _WORD_RE.finditer(s):
        if match.start() <= index <= match.end():
            return match.group()
    return ""


def byte_index_to_rune_index(s: str, index: int) -> int:
    """Convert a UTF-8 byte offset in ``s`` into a character offset."""
    count = 0
    offset = 0
    for char in s:
        if offset >= index:
            break
        count += 1
        offset += len(char.encode("utf-8"))
    return count