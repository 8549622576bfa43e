"""go-forth: a small interactive forth engine

Lines of forth are evaluated against an engine that owns a bounded operand
stack and an addressable dictionary of words.

    >>> import goforth
    >>> engine = goforth.Engine()
    >>> engine.eval("4 7 *")
    Status<ok>
    >>> engine.stack
    (28,)
"""

__version__ = "0.1.0"


from ._error import *
from ._ident import *
from ._cell import *
from ._stack import *
from ._dictionary import *
from ._word import *
from ._tokenize import *
from ._engine import *
from . import builtin
