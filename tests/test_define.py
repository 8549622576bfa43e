"""Tests for custom words made of other words."""

import pytest
import goforth
import forthtest


def test_define_from_tokens():
    f = forthtest.make_engine()
    f.define("square", ["dup", "*"])
    f.eval("7 square")
    forthtest.assert_stack(f, 49)


def test_define_returns_address():
    f = forthtest.make_engine()
    address = f.define("square", ["dup", "*"])
    assert f.words.get_addr(goforth.Ident("square")) == address
    assert isinstance(f.find_word("square"), goforth.Custom)


def test_define_mixes_words_and_literals():
    f = forthtest.make_engine()
    f.define("answer", ["40", goforth.Data(2), "+"])
    f.eval("answer")
    forthtest.assert_stack(f, 42)


def test_nested_custom_words():
    f = forthtest.make_engine()
    f.define("square", ["dup", "*"])
    f.define("fourth", ["square", "square"])
    f.eval("2 fourth")
    forthtest.assert_stack(f, 16)


def test_long_body():
    """Bodies are not capped at a fixed number of words."""
    f = forthtest.make_engine()
    f.define("twenty", ["1"] * 20 + ["+"] * 19)
    f.eval("twenty")
    forthtest.assert_stack(f, 20)


def test_define_resolves_immediately():
    f = forthtest.make_engine()
    f.define("two", ["2"])
    f.define("four", ["two", "two", "+"])
    f.define("two", ["3"])
    f.eval("four two")
    forthtest.assert_stack(f, 4, 3)


def test_define_unknown_word():
    f = forthtest.make_engine()
    with pytest.raises(goforth.NumeralParseFailure):
        f.define("broken", ["dup", "nope"])
    assert f.find_word("broken") is None


def test_custom_error_names_the_word():
    f = forthtest.make_engine()
    f.define("square", ["dup", "*"])
    with pytest.raises(goforth.StackUnderflow) as exc_info:
        f.eval("square")
    assert exc_info.value.token == "square"


def test_custom_under_compiling_mode():
    f = forthtest.make_engine()
    f.define("square", ["dup", "*"])
    f.mode = goforth.mode_compiling
    with pytest.raises(goforth.UnsupportedOperation):
        f.eval("3 square")


def test_run_word_directly():
    f = forthtest.make_engine()
    f.run_word(goforth.Custom([goforth.Data(3), goforth.Data(4), f.find_word("+")]))
    forthtest.assert_stack(f, 7)


def test_run_word_rejects_other_objects():
    f = forthtest.make_engine()
    with pytest.raises(TypeError):
        f.run_word(3)
