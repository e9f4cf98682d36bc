from zkutil.opt import FALSE, NULL_BOOL, NULL_STRING, TRUE, OptBool, OptString


def test_string_null_and_empty():
    assert OptString().is_null()
    assert not OptString("").is_null()
    assert OptString("").is_empty()
    assert not OptString().is_empty()
    assert not OptString("x").is_empty()


def test_not_empty_constructor():
    assert OptString.not_empty("").is_null()
    assert OptString.not_empty("foo") == OptString("foo")


def test_non_empty():
    assert OptString("").non_empty() == NULL_STRING
    assert OptString("foo").non_empty() == OptString("foo")
    assert NULL_STRING.non_empty() == NULL_STRING


def test_string_or():
    assert NULL_STRING.or_(OptString("b")) == OptString("b")
    assert OptString("a").or_(OptString("b")) == OptString("a")
    assert OptString("").or_(OptString("b")) == OptString("")


def test_or_string():
    assert NULL_STRING.or_string("alt").unwrap() == "alt"
    assert OptString("a").or_string("alt").unwrap() == "a"


def test_unwrap_and_str():
    assert NULL_STRING.unwrap() == ""
    assert OptString("foo").unwrap() == "foo"
    assert str(OptString("foo")) == "foo"


def test_string_equality():
    assert OptString("a") == OptString("a")
    assert OptString("a") != OptString("b")
    assert NULL_STRING == OptString()
    assert NULL_STRING != OptString("")


def test_string_to_json():
    assert OptString("foo").to_json() == '"foo"'
    assert NULL_STRING.to_json() == '""'


def test_bool_basics():
    assert NULL_BOOL.is_null()
    assert not TRUE.is_null()
    assert TRUE.unwrap() is True
    assert FALSE.unwrap() is False
    assert NULL_BOOL.unwrap() is False


def test_bool_or():
    assert NULL_BOOL.or_(TRUE) == TRUE
    assert FALSE.or_(TRUE) == FALSE
    assert NULL_BOOL.or_bool(True) == OptBool(True)
    assert FALSE.or_bool(True) == FALSE


def test_bool_to_json():
    assert TRUE.to_json() == "true"
    assert FALSE.to_json() == "false"
    assert NULL_BOOL.to_json() == "false"