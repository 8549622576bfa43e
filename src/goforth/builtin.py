"""Builtin words registered into every engine.

Binary operators pop the top of the stack as their first operand and the
value below it as the second, so `1 2 -` computes 2 - 1. Both operands are
popped before anything is checked, a failed `/` still consumes them.
"""

__all__ = ["register", "builtin_names"]

from ._cell import divide_cells, wrap_cell
from ._error import AccessedUndefinedAtAddr, UnsupportedOperation
from ._ident import Ident
from ._word import Builtin, Data


_builtins = []


def _word(name):
    """Decorator adding a function to the builtin catalog under `name`."""
    def decorator(func):
        _builtins.append((name, func))
        return func
    return decorator


def register(engine):
    """Insert every builtin word into the engine's dictionary.

    Returns:
        (list[int]) Addresses of the inserted words
    """
    return [
        engine.words.insert(Ident(name), Builtin(name, func))
        for name, func in _builtins
    ]


def builtin_names():
    return [name for name, _ in _builtins]


@_word("does>")
def _does(engine):
    raise UnsupportedOperation("does>")


@_word("create")
def _create(engine):
    raise UnsupportedOperation("create")


@_word("drop")
def _drop(engine):
    engine.data_stack.pop()


@_word("print")
def _print(engine):
    value = engine.data_stack.pop()
    engine.output(f":: {value}")
    engine.data_stack.push(value)


@_word("!")
def _store(engine):
    address = engine.data_stack.pop()
    value = engine.data_stack.pop()
    engine.words.set_from_addr(address, Data(value))


@_word("dict")
def _dict(engine):
    for address, (name, word) in enumerate(engine.words):
        label = str(name) if name is not None else "-"
        engine.output(f"{address}: DICT: {label} {word!r}")


@_word("@")
def _fetch(engine):
    address = engine.data_stack.pop()
    entry = engine.words.get_from_addr(address)
    if entry is None:
        raise AccessedUndefinedAtAddr(address)

    name, word = entry
    if isinstance(word, Data):
        engine.data_stack.push(word.value)
        return

    # Named words that are not data resolve to their own address
    if name is not None:
        resolved = engine.words.get_addr(name)
        if resolved is not None:
            engine.data_stack.push(resolved)
            return
    raise AccessedUndefinedAtAddr(address)


@_word("-")
def _subtract(engine):
    n1 = engine.data_stack.pop()
    n2 = engine.data_stack.pop()
    engine.data_stack.push(wrap_cell(n1 - n2))


@_word("+")
def _add(engine):
    n1 = engine.data_stack.pop()
    n2 = engine.data_stack.pop()
    engine.data_stack.push(wrap_cell(n1 + n2))


@_word("*")
def _multiply(engine):
    n1 = engine.data_stack.pop()
    n2 = engine.data_stack.pop()
    engine.data_stack.push(wrap_cell(n1 * n2))


@_word("/")
def _divide(engine):
    n1 = engine.data_stack.pop()
    n2 = engine.data_stack.pop()
    engine.data_stack.push(divide_cells(n1, n2))


@_word("dup")
def _dup(engine):
    value = engine.data_stack.pop()
    engine.data_stack.push(value)
    engine.data_stack.push(value)
