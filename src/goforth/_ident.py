"""Fixed length identifiers used as dictionary keys"""

__all__ = ["Ident", "IDENT_SIZE", "IDENT_PAD"]


IDENT_SIZE = 16
IDENT_PAD = "\0"


class Ident:
    """Dictionary key made of exactly IDENT_SIZE characters.

    The text is case folded, cut to IDENT_SIZE characters and padded with
    IDENT_PAD. Two identifiers are equal when their padded characters are
    equal, so long names sharing the same first 16 characters are the same
    key. Plain strings are converted before comparing, which lets
    dictionary lookups take a name as text.

    Args:
        text: (str | Ident) Name to convert

    Attributes:
        units: (str) The padded characters, always IDENT_SIZE long
    """

    __slots__ = ("units",)

    def __init__(self, text):
        if isinstance(text, Ident):
            units = text.units
        else:
            units = str(text).casefold()[:IDENT_SIZE].ljust(IDENT_SIZE, IDENT_PAD)
        object.__setattr__(self, "units", units)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if isinstance(other, str):
            other = Ident(other)
        if not isinstance(other, Ident):
            return NotImplemented
        return self.units == other.units

    def __hash__(self):
        return hash(self.units)

    def __str__(self):
        return self.units.rstrip(IDENT_PAD)

    def __repr__(self):
        return f"Ident<{self}>"
