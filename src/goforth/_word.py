"""Word variants stored in the dictionary

A word is one of three things. A `Builtin` wraps a native action that gets
full access to the engine. `Data` holds a single operand. `Custom` is an
ordered body of other words, executed one after another.
"""

__all__ = ["Builtin", "Data", "Custom", "is_word"]


class Builtin:
    """Native operation.

    Args:
        name: (str) Name the action was registered under
        action: (callable) Called with the engine, return value ignored
    """

    __slots__ = ("name", "action")

    def __init__(self, name, action):
        self.name = name
        self.action = action

    def __call__(self, engine):
        self.action(engine)

    def __repr__(self):
        return f"Builtin<{self.name}>"


class Data:
    """Literal operand, pushed onto the stack when executed."""

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Data):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"Data<{self.value}>"


class Custom:
    """User defined word made of a sequence of other words.

    Words in the body are shared, the same Builtin or Data instance may
    appear in several bodies (or several times in one).

    Args:
        body: (Iterable[Builtin | Data | Custom]) Words executed in order
    """

    __slots__ = ("body",)

    def __init__(self, body):
        self.body = tuple(body)
        for word in self.body:
            if not is_word(word):
                raise TypeError(f"Custom word body can only hold words, got {word!r}")

    def __len__(self):
        return len(self.body)

    def __repr__(self):
        inner = " ".join(repr(word) for word in self.body)
        return f"Custom<{inner}>"


def is_word(obj):
    return isinstance(obj, (Builtin, Data, Custom))
