# zkutil

Helpers for tools that manage a notebook of plain-text notes. The package has
no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `zkutil.fts5`

`convert_query(query)` turns a search-engine-style query into an SQLite FTS5
query. Bare terms are quoted, `AND`/`OR`/`NOT` pass through, `|` means `OR`, a
leading `-` means `NOT`, `+` is dropped, and `^`, trailing `*` and `col:`
filters are kept outside the quotes:

```python
from zkutil.fts5 import convert_query

convert_query('foo -bar')     # '"foo"  NOT "bar"'
convert_query('col:foo ba*')  # 'col:"foo" "ba"*'
```

### `zkutil.text`

String helpers: `prepend`, `pluralize`, `split_lines` (LF or CRLF; raises
`ValueError` on a line over 2 MiB), `join_lines`, `join_ints`, `is_url`,
`remove_duplicates`, `remove_blank`, `expand_whitespace_literals`, `contains`,
`word_at` and `byte_index_to_rune_index`.

### `zkutil.opt`

`OptString` and `OptBool` are frozen dataclasses holding a value or `None`, so
that "unset" differs from "empty" or `False`. They offer `is_null`, `or_`,
`unwrap`, `to_json`, plus `OptString.not_empty`, `is_empty`, `non_empty`,
`or_string` and `OptBool.or_bool`. The constants `NULL_STRING`, `NULL_BOOL`,
`TRUE` and `FALSE` are provided.

### `zkutil.errors`

`wrap`, `wrapf`, `wrapper` and `wrapperf` put a context message in front of an
exception, giving a `WrappedError` whose `cause` is the original. `None` in
gives `None` out.

### `zkutil.logger`

The `Logger` base class with `printf`, `println` and `err`, and three
implementations: `NullLogger` (discards everything), `StdLogger` (writes
prefixed lines to a stream, standard error by default) and `ProxyLogger`
(delegates to a `logger` attribute that can be replaced at runtime).

### `zkutil.env` and `zkutil.shell`

`get_opt_env(key)` reads an environment variable as an `OptString`, treating an
empty value as unset; `environment()` returns a copy of the environment.

`command_from_string(command, *args)` builds a command for `subprocess`: on
POSIX a list running `command` through `$ZK_SHELL`, then `$SHELL`, then `sh`,
with `args` as positional parameters; on Windows a `cmd` command-line string.

### `zkutil.paths`, `zkutil.walk` and `zkutil.diff`

`paths` has `Metadata` (a path and its modification date), `exists`,
`dir_exists`, `drop_ext`, `filename_stem`, `write_string` (creates parent
directories) and `expand_tilde`.

`walk(base_path, logger, notebook_root, should_ignore_path)` yields the
`Metadata` of every file under `base_path` in sorted order, with paths relative
to `base_path`. Hidden files and directories are skipped, except a directory
named `notebook_root`; errors are sent to the logger.

`diff(source, target, force_modified, callback)` compares two listings sorted
by path and calls `callback` with a `DiffChange(path, kind)` for each file,
where `kind` is a `DiffKind` (`ADDED`, `MODIFIED`, `REMOVED`, `UNCHANGED`,
each with a `symbol()`). An exception from the callback stops the comparison.
It returns the number of files read from `source`:

```python
from zkutil.diff import diff

changes = []
count = diff(source, target, False, changes.append)
```

### `zkutil.pager`

`open_pager(pager_cmd, logger)` starts a pager chosen by `select_pager_cmd`:
`$ZK_PAGER`, then `pager_cmd`, then `$PAGER`, then the first of `less -FIRX`
and `more -R` found by `select_default_pager`. With none available, the
returned `Pager` writes to standard output. `Pager` has `write`,
`write_string` (adds a newline) and `close`, and works as a context manager;
when the pager process exits with an error, `close` logs it and raises
`SystemExit(1)`.

### `zkutil.dates`

`time_from_natural(date)` parses RFC 3339 timestamps, the local forms
`YYYY-MM-DDTHH:MM:SS`, `YYYY-MM-DDTHH:MM`, `YYYY-MM-DD`, `YYYY-MM`, `YYYY` and
`HH:MM`, and simple phrases such as `now`, `yesterday`, `monday`,
`last week`, `2 days ago` or `in 3 hours`. An empty string gives the current
time; anything else raises `ValueError`. `NowProvider` and `FrozenProvider`
supply dates through a `date()` method.

### `zkutil.dirs`

`parse_dirs(args)` takes `--notebook-dir` and `--working-dir` / `-W` (as
`--flag value` or `--flag=value`) out of an argument list and returns a `Dirs`
with absolute paths plus the remaining arguments; a flag without a path raises
`ValueError`. `notebook_search_dirs(dirs)` lists where to look for a notebook:
the given notebook directory alone, or else the working directory followed by
`$ZK_NOTEBOOK_DIR` when it is set.

## What it does not do

This is a library of building blocks. It has no command-line program, does not
create, index or store notes, has no database or search engine of its own (it
only produces FTS5 query text), and does not run user-defined aliases.