"""Operand cells: fixed width signed integers"""

__all__ = ["CELL_BITS", "CELL_MIN", "CELL_MAX", "parse_cell", "wrap_cell", "divide_cells"]

import re

from ._error import DivideByZero, NumeralParseFailure


CELL_BITS = 32
CELL_MIN = -(1 << (CELL_BITS - 1))
CELL_MAX = (1 << (CELL_BITS - 1)) - 1

_numeral = re.compile(r"[+-]?[0-9]+")


def parse_cell(text):
    """Convert a decimal numeral to a cell.

    Args:
        text: (str) Optional sign followed by ascii digits

    Returns:
        (int) Parsed value

    Raises:
        NumeralParseFailure: Not a numeral, or outside the cell range
    """
    if not _numeral.fullmatch(text):
        raise NumeralParseFailure(text)
    value = int(text)
    if not CELL_MIN <= value <= CELL_MAX:
        raise NumeralParseFailure(text)
    return value


def wrap_cell(value):
    """Wrap an arbitrary integer to the cell width (two's complement)."""
    return (value - CELL_MIN) % (1 << CELL_BITS) + CELL_MIN


def divide_cells(dividend, divisor):
    """Integer division truncated toward zero, wrapped to the cell width."""
    if divisor == 0:
        raise DivideByZero()
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return wrap_cell(quotient)
