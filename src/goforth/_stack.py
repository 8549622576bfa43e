"""Bounded operand stack"""

__all__ = ["Stack"]

from ._error import StackOverflow, StackUnderflow


class Stack:
    """Fixed capacity last-in first-out sequence of operands.

    The stack never grows past its capacity. Pushing onto a full stack or
    popping an empty one raises an error and leaves the contents untouched.

    Args:
        capacity: (int) Maximum number of values held

    Attributes:
        capacity: (int) Maximum number of values held
    """

    __slots__ = ("capacity", "_data")

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError(f"Stack capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._data = []

    def __len__(self):
        return len(self._data)

    def __repr__(self):
        return f"Stack<{len(self._data)}/{self.capacity}>"

    @property
    def data(self):
        """(tuple) Live contents, bottom first."""
        return tuple(self._data)

    def push(self, value):
        if len(self._data) >= self.capacity:
            raise StackOverflow(self.capacity)
        self._data.append(value)

    def pop(self):
        if not self._data:
            raise StackUnderflow()
        return self._data.pop()

    def clear(self):
        self._data.clear()
