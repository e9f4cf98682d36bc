import pytest

from zkutil.text import (
    byte_index_to_rune_index,
    contains,
    expand_whitespace_literals,
    is_url,
    join_ints,
    join_lines,
    pluralize,
    prepend,
    remove_blank,
    remove_duplicates,
    split_lines,
    word_at,
)


@pytest.mark.parametrize(
    "text, prefix, expected",
    [
        ("", "> ", ""),
        ("One line", "> ", "> One line"),
        ("One line\nTwo lines", "> ", "> One line\n> Two lines"),
        ("One line\nTwo lines\nThree lines", "> ", "> One line\n> Two lines\n> Three lines"),
        ("Newline\n", "> ", "> Newline\n"),
    ],
)
def test_prepend(text, prefix, expected):
    assert prepend(text, prefix) == expected


@pytest.mark.parametrize(
    "word, count, expected",
    [
        ("", 1, ""),
        ("", 2, ""),
        ("word", -2, "words"),
        ("word", -1, "word"),
        ("word", 0, "word"),
        ("word", 1, "word"),
        ("word", 2, "words"),
        ("word", 1000, "words"),
    ],
)
def test_pluralize(word, count, expected):
    assert pluralize(word, count) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("One line", ["One line"]),
        ("One line\nTwo lines", ["One line", "Two lines"]),
        ("One line\nTwo lines\n\nThree lines", ["One line", "Two lines", "", "Three lines"]),
    ],
)
def test_split_lines(text, expected):
    assert split_lines(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("One line", "One line"),
        ("One line\nTwo lines", "One line Two lines"),
        ("One line\nTwo lines\n\nThree lines", "One line Two lines  Three lines"),
        ("One line\nTwo lines\n Three lines", "One line Two lines  Three lines"),
    ],
)
def test_join_lines(text, expected):
    assert join_lines(text) == expected


@pytest.mark.parametrize(
    "ints, expected",
    [([], ""), ([1], "1"), ([1, 2], "1,2"), ([1, 2, 3], "1,2,3")],
)
def test_join_ints(ints, expected):
    assert join_ints(ints, ",") == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", False),
        ("example.com/", False),
        ("path", False),
        ("http://example.com", True),
        ("https://example.com/dir", True),
        ("http://example.com/dir", True),
        ("ftp://example.com/", True),
    ],
)
def test_is_url(text, expected):
    assert is_url(text) is expected


@pytest.mark.parametrize(
    "items, expected",
    [
        ([], []),
        (["One"], ["One"]),
        (["One", "Two"], ["One", "Two"]),
        (["One", "Two", "One"], ["One", "Two"]),
        (["Two", "One", "Two", "One"], ["Two", "One"]),
        (["One", "Two", "OneTwo"], ["One", "Two", "OneTwo"]),
    ],
)
def test_remove_duplicates(items, expected):
    assert remove_duplicates(items) == expected


def test_remove_duplicates_none():
    assert remove_duplicates(None) is None


@pytest.mark.parametrize(
    "items, expected",
    [
        ([], []),
        (["One"], ["One"]),
        (["One", "Two"], ["One", "Two"]),
        (["One", "Two", ""], ["One", "Two"]),
        (["Two", "One", " "], ["Two", "One"]),
        (["One", "Two", "\t  "], ["One", "Two"]),
    ],
)
def test_remove_blank(items, expected):
    assert remove_blank(items) == expected


def test_remove_blank_none():
    assert remove_blank(None) is None


@pytest.mark.parametrize(
    "s, expected",
    [("nothing", "nothing"), ("newline\\ntab\\t", "newline\ntab\t")],
)
def test_expand_whitespace_literals(s, expected):
    assert expand_whitespace_literals(s) == expected


@pytest.mark.parametrize(
    "items, s, expected",
    [
        ([], "", False),
        ([], "none", False),
        (["one"], "none", False),
        (["one"], "one", True),
        (["one", "two"], "one", True),
        (["one", "two"], "three", False),
    ],
)
def test_contains(items, s, expected):
    assert contains(items, s) is expected


@pytest.mark.parametrize(
    "s, pos, expected",
    [
        ("", 0, ""),
        ("\t\t  ", 2, ""),
        ("word", 2, "word"),
        ("\t\tword\t", 4, "word"),
        ("one two three", 4, "two"),
        ("one two three", 5, "two"),
        ("one two three", 7, "two"),
        ("one two-third three", 5, "two-third"),
        ("one two,three", 5, "two"),
        ("one two;three", 5, "two"),
        ("one [two] three", 5, "two"),
        ('one "two" three', 5, "two"),
        ("one 'two' three", 5, "two"),
        ("one\ntwo\nthree", 5, "two"),
        ("one\ttwo\tthree", 5, "two"),
        ("one @:~two three", 5, "@:~two"),
    ],
)
def test_word_at(s, pos, expected):
    assert word_at(s, pos) == expected


SOURCE = "une étoile bleuâtre"


@pytest.mark.parametrize(
    "s, index, expected",
    [
        ("", 0, 0),
        (SOURCE, -2, 0),
        (SOURCE, -1, 0),
        (SOURCE, 0, 0),
        (SOURCE, 1, 1),
        (SOURCE, 4, 4),
        (SOURCE, 5, 5),
        (SOURCE, 6, 5),
        (SOURCE, 7, 6),
        (SOURCE, 16, 15),
        (SOURCE, 17, 16),
        (SOURCE, 18, 16),
        (SOURCE, 19, 17),
        (SOURCE, 20, 18),
        (SOURCE, 21, 19),
        (SOURCE, 22, 19),
    ],
)
def test_byte_index_to_rune_index(s, index, expected):
    assert byte_index_to_rune_index(s, index) == expected