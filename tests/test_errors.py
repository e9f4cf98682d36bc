import pytest

from zkutil.errors import WrappedError, wrap, wrapf, wrapper, wrapperf


def test_wrap_none_is_none():
    assert wrap(None, "context") is None
    assert wrapf(None, "context %s", "x") is None
    assert wrapper("context")(None) is None


def test_wrap_message_and_cause():
    cause = ValueError("boom")
    err = wrap(cause, "context")
    assert isinstance(err, WrappedError)
    assert str(err) == "context: boom"
    assert err.__cause__ is cause
    assert err.cause is cause
    assert err.msg == "context"


def test_wrapf_formats_message():
    err = wrapf(ValueError("boom"), "failed %s %d", "file", 3)
    assert str(err) == "failed file 3: boom"


def test_wrapper_reusable():
    wrap_ctx = wrapper("ctx")
    first = wrap_ctx(KeyError("a"))
    second = wrap_ctx(OSError("b"))
    assert str(first).startswith("ctx: ")
    assert str(second) == "ctx: b"


def test_wrapperf():
    err = wrapperf("in %s", "note.md")(RuntimeError("bad"))
    assert str(err) == "in note.md: bad"


def test_nested_wrapping_can_be_raised():
    root = ValueError("root")
    inner = wrap(root, "inner")
    outer = wrap(inner, "outer")
    assert str(outer) == "outer: inner: root"
    assert outer.cause is inner
    assert inner.cause is root
    with pytest.raises(WrappedError) as excinfo:
        raise outer
    assert excinfo.value is outer
    assert excinfo.value.msg == "outer"