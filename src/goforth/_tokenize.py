"""Split source lines into word tokens.

Tokens are `lark.Token` strings, so they compare and hash like the plain
text of the word, and also carry the column the word started at.
"""

__all__ = ["tokenize"]

import lark


def tokenize(line):
    """Split a line into whitespace separated tokens.

    Args:
        line: (str) Source text, may contain newlines

    Returns:
        (list[lark.Token]) Tokens in source order
    """
    parser = _lark_parser("forth")
    tree = parser.parse(line)
    return list(tree.children)


_parsers = {}


def _lark_parser(name):
    """Get globally shared lark parser.

    Args:
        name: (str) name of the grammar file (without .lark)

    Returns:
        (lark.Lark) Parser instance
    """
    parser = _parsers.get(name)
    if parser is not None:
        return parser

    path = f"lark/{name}.lark"
    parser = lark.Lark.open(path, rel_to=__file__, parser="lalr")
    _parsers[name] = parser
    return parser
