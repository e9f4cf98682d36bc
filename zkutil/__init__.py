"""Helpers for plain-text notebook tools: FTS5 queries, text, paths, diffs, pagers and dates."""

__version__ = "0.1.0"