"""Conversion of search-engine style queries to SQLite FTS5 syntax."""

from __future__ import annotations

_PASSTHROUGH_TOKENS = frozenset({"AND", "OR", "NOT"})
_TERM_SEPARATORS = frozenset(" \t\n()")


def convert_query(query: str) -> str:
    """Transform a Google-like query into an FTS5 one."""
    out: list[str] = []
    term = ""
    in_quote = False

    def close_term() -> None:
        nonlocal term
        if not term:
            return
        if not in_quote and term in _PASSTHROUGH_TOKENS:
            out.append(term)
        else:
            # Keep a trailing * outside the quotes so FTS5 treats it as a prefix.
            is_prefix = not in_quote and term.endswith("*")
            text = term[:-1] if is_prefix else term
            out.append(f'"{text}"')
            if is_prefix:
                out.append("*")
        term = ""

    for c in query:
        if c == '"':
            if in_quote:
                close_term()
            in_quote = not in_quote
        elif not term and c in "^*":
            out.append(c)
        elif not in_quote and c == ":":
            out.append(term + c)
            term = ""
        elif c == "-" and not term:
            out.append(" NOT ")
        elif not in_quote and c == "|":
            close_term()
            out.append(" OR ")
        elif not in_quote and c == "+" and not term:
            continue
        elif not in_quote and c in _TERM_SEPARATORS:
            close_term()
            out.append(c)
        else:
            term += c

    close_term()
    return "".join(out)