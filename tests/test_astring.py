import math

import pytest

from wirekit.astring import ArduinoString


def test_default_is_valid_and_empty():
    s = ArduinoString()
    assert bool(s) is True
    assert len(s) == 0
    assert str(s) == ""


def test_none_is_invalid():
    s = ArduinoString(None)
    assert bool(s) is False
    assert len(s) == 0
    assert s.c_str() is None


def test_copy_is_independent():
    original = ArduinoString("hello")
    copy = ArduinoString(original)
    copy.concat("!")
    assert str(original) == "hello"
    assert str(copy) == "hello" + "!"


def test_integer_decimal():
    assert str(ArduinoString(42)) == str(42)
    assert str(ArduinoString(-7)) == str(-7)


def test_integer_bases():
    assert str(ArduinoString(255, 16)) == "ff"
    assert str(ArduinoString(5, 2)) == format(5, "b")
    assert str(ArduinoString(-1, 16)) == format(0xFFFFFFFF, "x")


def test_invalid_base_raises():
    with pytest.raises(ValueError):
        ArduinoString(10, 1)
    with pytest.raises(ValueError):
        ArduinoString(10, 37)


def test_float_default_two_places():
    assert str(ArduinoString(3.14159)) == "3.14"


def test_float_decimal_places():
    assert str(ArduinoString(2.5, 3)) == "2.500"


def test_reserve_validates_invalid_string():
    s = ArduinoString(None)
    assert s.reserve(0) is True
    assert bool(s) is True
    assert str(s) == ""


def test_reserve_keeps_contents():
    s = ArduinoString("abc")
    assert s.reserve(100) is True
    assert str(s) == "abc"


def test_concat_values():
    s = ArduinoString("n=")
    assert s.concat(12) is True
    assert s.concat("/") is True
    assert s.concat(ArduinoString("x")) is True
    assert str(s) == "n=" + str(12) + "/" + "x"


def test_concat_float_uses_two_places():
    s = ArduinoString("")
    assert s.concat(1.5) is True
    assert str(s) == str(ArduinoString(1.5))


def test_concat_invalid_leaves_unchanged():
    s = ArduinoString("keep")
    assert s.concat(None) is False
    assert s.concat(ArduinoString(None)) is False
    assert str(s) == "keep"


def test_concat_onto_invalid_validates():
    s = ArduinoString(None)
    assert s.concat("x") is True
    assert bool(s) is True
    assert str(s) == "x"


def test_concat_empty_onto_invalid_stays_invalid():
    s = ArduinoString(None)
    assert s.concat("") is True
    assert bool(s) is False


def test_iadd_returns_same_object():
    s = ArduinoString("a")
    t = s
    t += "b"
    assert t is s
    assert str(s) == "a" + "b"


def test_add_leaves_operand_unchanged():
    a = ArduinoString("abc")
    b = a + "def"
    assert str(a) == "abc"
    assert str(b) == "abc" + "def"


def test_add_invalid_gives_invalid():
    result = ArduinoString("abc") + None
    assert bool(result) is False
    assert len(result) == 0


def test_compare_to_signs():
    assert ArduinoString("abc").compare_to("abd") < 0
    assert ArduinoString("abd").compare_to("abc") > 0
    assert ArduinoString("abc").compare_to("abc") == 0
    assert ArduinoString("ab").compare_to("abc") < 0


def test_compare_to_with_invalid():
    assert ArduinoString(None).compare_to("a") == -ord("a")
    assert ArduinoString("b").compare_to(None) == ord("b")
    assert ArduinoString(None).compare_to(ArduinoString(None)) == 0


def test_equals():
    s = ArduinoString("hello")
    assert s.equals("hello")
    assert s.equals(ArduinoString("hello"))
    assert not s.equals("hell")
    assert s == "hello"
    assert not (s == "world")


def test_empty_equals_none_and_empty():
    assert ArduinoString("").equals(None)
    assert ArduinoString("").equals("")
    assert ArduinoString(None).equals(ArduinoString(""))
    assert not ArduinoString("x").equals(None)


def test_ordering_operators():
    a, b = ArduinoString("apple"), ArduinoString("banana")
    assert a < b
    assert a <= b
    assert b > a
    assert b >= a
    assert a <= ArduinoString("apple")
    words = [ArduinoString(w) for w in ["pear", "apple", "fig"]]
    assert [str(w) for w in sorted(words)] == sorted(["pear", "apple", "fig"])


def test_equals_ignore_case():
    assert ArduinoString("HeLLo").equals_ignore_case("hello")
    assert not ArduinoString("hello").equals_ignore_case("help!")
    assert not ArduinoString("hi").equals_ignore_case("hip")
    assert ArduinoString("").equals_ignore_case(ArduinoString(None))


def test_starts_with():
    s = ArduinoString("hello world")
    assert s.starts_with("hello")
    assert not s.starts_with("world")
    assert s.starts_with("world", 6)
    assert not s.starts_with("world", 100)
    assert not ArduinoString("hi").starts_with("hello")


def test_ends_with():
    s = ArduinoString("hello world")
    assert s.ends_with("world")
    assert not s.ends_with("hello")
    assert not ArduinoString("d").ends_with("world")
    assert not ArduinoString(None).ends_with("")


def test_char_access():
    s = ArduinoString("abc")
    assert s.char_at(1) == "b"
    assert s[2] == "c"
    assert s.char_at(3) == "\0"
    assert s.char_at(-1) == "\0"
    assert ArduinoString(None).char_at(0) == "\0"


def test_set_char_at():
    s = ArduinoString("abc")
    s.set_char_at(0, "x")
    s.set_char_at(10, "y")
    assert str(s) == "x" + "bc"
    s.set_char_at(2, ord("z"))
    assert s[2] == "z"


def test_get_bytes():
    s = ArduinoString("hello")
    assert s.get_bytes(3) == "hello"[:2].encode()
    assert s.get_bytes(100) == b"hello"
    assert s.get_bytes(100, 1) == "hello"[1:].encode()
    assert s.get_bytes(10, 5) == b""
    assert s.get_bytes(0) == b""


def test_substring():
    s = ArduinoString("hello")
    assert str(s.substring(1, 3)) == "hello"[1:3]
    assert str(s.substring(3, 1)) == str(s.substring(1, 3))
    assert str(s.substring(2)) == "hello"[2:]
    assert str(s.substring(2, 99)) == "hello"[2:]
    empty = s.substring(5)
    assert str(empty) == ""
    assert bool(empty) is True


def test_to_int():
    assert ArduinoString("  -123abc").to_int() == -123
    assert ArduinoString("+5").to_int() == 5
    assert ArduinoString("abc").to_int() == 0
    assert ArduinoString(None).to_int() == 0


def test_to_double():
    assert ArduinoString("12.5kg").to_double() == 12.5
    assert ArduinoString(" -0.25").to_double() == -0.25
    assert ArduinoString("3.5e2x").to_double() == float("3.5e2")
    assert ArduinoString("1e").to_double() == 1.0
    assert ArduinoString("x1").to_double() == 0.0
    assert math.isinf(ArduinoString("inf").to_double())


def test_to_float_is_single_precision():
    value = ArduinoString("0.1").to_float()
    assert abs(value - 0.1) < 1e-7
    assert value != 0.1
    assert ArduinoString("0.5").to_float() == 0.5


def test_to_float_overflow_is_infinite():
    assert ArduinoString("1e300").to_float() == math.inf
    assert ArduinoString("-1e300").to_float() == -math.inf


def test_inherited_search_and_edit():
    s = ArduinoString("one two one")
    assert s.index_of("one", 1) == "one two one".find("one", 1)
    assert s.last_index_of("one") == "one two one".rfind("one")
    s.replace("one", "1")
    assert str(s) == "one two one".replace("one", "1")
    s.to_upper_case()
    assert str(s) == "one two one".replace("one", "1").upper()