"""Tests for fixed length identifiers."""

import pytest
import goforth


def test_padding():
    ident = goforth.Ident("dup")
    assert len(ident.units) == goforth.IDENT_SIZE
    assert ident.units == "dup" + goforth.IDENT_PAD * 13
    assert str(ident) == "dup"


def test_equality():
    assert goforth.Ident("balance") == goforth.Ident("balance")
    assert goforth.Ident("balance") != goforth.Ident("balanced")
    assert hash(goforth.Ident("x")) == hash(goforth.Ident("x"))


def test_case_insensitive():
    assert goforth.Ident("DUP") == goforth.Ident("dup")
    assert goforth.Ident("Does>") == goforth.Ident("does>")


def test_truncated_to_sixteen():
    """Names longer than 16 characters only keep their first 16."""
    long_a = "abcdefghijklmnop-first"
    long_b = "abcdefghijklmnop-second"
    assert goforth.Ident(long_a) == goforth.Ident(long_b)
    assert str(goforth.Ident(long_a)) == "abcdefghijklmnop"


def test_copy_from_ident():
    ident = goforth.Ident("swap")
    assert goforth.Ident(ident) == ident


def test_immutable():
    ident = goforth.Ident("rot")
    with pytest.raises(AttributeError):
        ident.units = "other"


def test_not_equal_to_other_types():
    assert goforth.Ident("1") != 1
    assert goforth.Ident("x") != None


def test_equal_to_strings():
    """Plain strings compare by their converted units."""
    assert goforth.Ident("x") == "x"
    assert "BALANCE" == goforth.Ident("balance")
    assert goforth.Ident("x") != "y"
    assert goforth.Ident("abcdefghijklmnop") == "abcdefghijklmnop-longer"
