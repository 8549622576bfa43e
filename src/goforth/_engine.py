"""Evaluation engine for lines of forth.

The engine owns a bounded operand stack and an addressable dictionary. Each
call to `eval` splits a line into tokens and runs them left to right through
a small state machine. In the execute state tokens are control words, names
found in the dictionary, or numerals. After `var` the state machine waits
for the next token and uses it to name a new variable.

Variables are two dictionary entries. An anonymous slot holds the value and
a named entry holds the address of that slot. Executing the name pushes the
address, `!` and `@` then store and fetch through it.

`yield` stops the line and keeps whatever tokens were left in a
`Continuation`. The next `eval` or `resume` runs those tokens before anything
else.
"""

__all__ = [
    "Engine",
    "Continuation",
    "Mode",
    "Status",
    "Fsm",
    "mode_interpreting",
    "mode_compiling",
    "status_ok",
    "status_yielding",
    "status_shutdown",
    "fsm_execute",
    "fsm_get_variable",
    "STACK_CAPACITY",
    "DICTIONARY_CAPACITY",
]

import logging

from . import builtin
from ._cell import parse_cell
from ._dictionary import Dictionary
from ._error import ForthError, UnsupportedOperation
from ._ident import Ident
from ._stack import Stack
from ._tokenize import tokenize
from ._word import Builtin, Custom, Data, is_word

log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


STACK_CAPACITY = 32767
DICTIONARY_CAPACITY = 666

_SHUTDOWN_WORDS = ("bye",)
_YIELD_WORDS = ("yield",)
_VARIABLE_WORDS = ("var", "variable")


class _State:
    __slots__ = ("name",)

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"{type(self).__name__}<{self.name}>"


class Mode(_State):
    """Execution mode, decides what happens to a resolved word."""


class Status(_State):
    """Outcome of a successful `eval`."""


class Fsm(_State):
    """Token interpretation state."""


mode_interpreting = Mode("interpreting")
mode_compiling = Mode("compiling")

status_ok = Status("ok")
status_yielding = Status("yielding")
status_shutdown = Status("shutdown")

fsm_execute = Fsm("execute")
fsm_get_variable = Fsm("get_variable")


class Continuation:
    """Suspended evaluation, captured when a line yields.

    Args:
        tokens: (Iterable[str]) Tokens not yet evaluated, in order
        fsm: (Fsm) State machine position at the yield
        mode: (Mode) Execution mode at the yield
    """

    __slots__ = ("tokens", "fsm", "mode")

    def __init__(self, tokens, fsm, mode):
        object.__setattr__(self, "tokens", tuple(tokens))
        object.__setattr__(self, "fsm", fsm)
        object.__setattr__(self, "mode", mode)

    def __setattr__(self, name, value):
        raise AttributeError("Continuation is immutable")

    def __repr__(self):
        rest = " ".join(str(token) for token in self.tokens)
        return f"Continuation<{self.fsm.name} {self.mode.name}: {rest!r}>"


class Engine:
    """Stack based interpreter for a small forth dialect.

    Args:
        stack_capacity: (int) Maximum number of operands on the stack
        dictionary_capacity: (int) Maximum number of dictionary entries,
            builtins included
        output: (callable | None) Receives each line of diagnostic output
            from words like `print` and `dict`, defaults to `print`

    Attributes:
        data_stack: (Stack) Operand stack, mutated by words
        words: (Dictionary) Dictionary of words, mutated by words
        mode: (Mode) Current execution mode
        fsm: (Fsm) Current token interpretation state
        continuation: (Continuation | None) Tokens left over from a yield
        output: (callable) Diagnostic output sink
    """

    def __init__(self, stack_capacity=STACK_CAPACITY,
                 dictionary_capacity=DICTIONARY_CAPACITY, output=None):
        self.data_stack = Stack(stack_capacity)
        self.words = Dictionary(dictionary_capacity)
        self.output = output if output is not None else print
        self.mode = mode_interpreting
        self.fsm = fsm_execute
        self.continuation = None
        self.reset()

    def __repr__(self):
        return f"Engine<{self.data_stack!r} {self.words!r} {self.fsm.name}>"

    def reset(self):
        """Return to a pristine state with only the builtins defined."""
        self.fsm = fsm_execute
        self.mode = mode_interpreting
        self.continuation = None
        self.words.clear()
        self.data_stack.clear()
        builtin.register(self)
        log.debug("reset engine, %d builtin words", len(self.words))

    @property
    def stack(self):
        """(tuple[int]) Operands, bottom of the stack first."""
        return self.data_stack.data

    @property
    def dictionary(self):
        """(tuple) Dictionary (name, word) entries in address order."""
        return self.words.entries

    def push(self, value):
        self.data_stack.push(value)

    def pop(self):
        return self.data_stack.pop()

    def eval(self, line):
        """Evaluate one line of source.

        Tokens saved by an earlier `yield` run first, followed by the tokens
        of `line`.

        Args:
            line: (str) Source text

        Returns:
            (Status) status_ok, status_yielding or status_shutdown

        Raises:
            ForthError: Evaluation stopped, the rest of the line is dropped
        """
        tokens = tokenize(line)
        pending = self.continuation
        if pending is not None:
            self.continuation = None
            self.fsm = pending.fsm
            self.mode = pending.mode
            tokens = list(pending.tokens) + tokens
        return self._evaluate(tokens)

    def resume(self, continuation=None):
        """Continue a yielded evaluation.

        Args:
            continuation: (Continuation | None) Evaluation to continue,
                defaults to the one saved by the last yield

        Returns:
            (Status) Same as `eval`, status_ok if there was nothing to resume

        When an explicit continuation is given while another one is saved,
        the saved one stays queued behind it and runs on the next `eval`
        or `resume`.
        """
        pending = self.continuation
        if continuation is None:
            continuation = pending
        self.continuation = None
        if continuation is None:
            return status_ok
        if pending is continuation:
            pending = None

        self.fsm = continuation.fsm
        self.mode = continuation.mode
        try:
            status = self._evaluate(list(continuation.tokens))
        except ForthError:
            self.continuation = pending
            raise

        if pending is None:
            return status
        if status is status_yielding:
            current = self.continuation
            self.continuation = Continuation(
                current.tokens + pending.tokens, current.fsm, current.mode)
        else:
            self.continuation = pending
        return status

    def find_word(self, name):
        """Look up a word by name, None if it is not defined."""
        return self.words.get(Ident(name))

    def resolve(self, token):
        """Word for a token, either from the dictionary or a numeral.

        Raises:
            NumeralParseFailure: Token is undefined and not a numeral
        """
        word = self.find_word(token)
        if word is None:
            word = Data(parse_cell(str(token)))
        return word

    def define(self, name, body):
        """Define a custom word from a sequence of words or tokens.

        Tokens are resolved immediately, later redefinitions of the names
        they refer to do not change the custom word.

        Returns:
            (int) Address of the new word
        """
        words = [item if is_word(item) else self.resolve(item) for item in body]
        address = self.words.insert(Ident(name), Custom(words))
        log.debug("defined %s with %d words at %d", name, len(words), address)
        return address

    def run_word(self, word):
        """Execute a word against the stack and dictionary."""
        match word:
            case Builtin():
                word(self)
            case Data():
                self.data_stack.push(word.value)
            case Custom():
                for inner in word.body:
                    self.run_word(inner)
            case _:
                raise TypeError(f"Not a word: {word!r}")

    def _evaluate(self, tokens):
        for index, token in enumerate(tokens):
            try:
                status = self._step(token)
            except ForthError as err:
                err.attach(token)
                log.debug("error at %r: %s", str(token), err.message)
                raise

            if status is status_yielding:
                self.continuation = Continuation(tokens[index + 1:], self.fsm, self.mode)
                log.debug("yield with %d tokens left", len(self.continuation.tokens))
                return status
            if status is status_shutdown:
                log.info("shutdown requested")
                return status
        return status_ok

    def _step(self, token):
        if self.fsm is fsm_get_variable:
            self._declare_variable(token)
            return None

        keyword = token.casefold()
        if keyword in _SHUTDOWN_WORDS:
            return status_shutdown
        if keyword in _YIELD_WORDS:
            return status_yielding
        if keyword in _VARIABLE_WORDS:
            self.fsm = fsm_get_variable
            return None

        word = self.resolve(token)
        if self.mode is mode_compiling:
            raise UnsupportedOperation("compiling mode")
        self.run_word(word)
        return None

    def _declare_variable(self, name):
        # Back to execute first, a failed declaration does not swallow
        # the next token as a name
        self.fsm = fsm_execute
        address = self.words.insert(None, Data(0))
        self.words.insert(Ident(name), Data(address))
        log.debug("variable %s stored at %d", name, address)
