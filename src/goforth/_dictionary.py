"""Ordered, addressable dictionary of words

The address of an entry is its position in the dictionary. Addresses are not
stored anywhere, so they move whenever an earlier entry is removed. Inserting
under a name that already exists removes the old entry and appends the new
one at the end, which shifts every entry that followed the old one down by
one address.
"""

__all__ = ["Dictionary"]

from ._error import DictionaryOverflow, DictionaryUndefinedAccess


class Dictionary:
    """Capacity bounded list of (name, value) entries.

    Names are optional. Entries without a name are anonymous slots, only
    reachable through their address. Lookups are linear scans from the
    start of the dictionary.

    Args:
        capacity: (int) Maximum number of entries

    Attributes:
        capacity: (int) Maximum number of entries
    """

    __slots__ = ("capacity", "_entries")

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError(f"Dictionary capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._entries = []

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(tuple(self._entries))

    def __repr__(self):
        return f"Dictionary<{len(self._entries)}/{self.capacity}>"

    @property
    def entries(self):
        """(tuple) All (name, value) entries in address order."""
        return tuple(self._entries)

    def insert(self, name, value):
        """Append an entry and return its address.

        A named insert first removes the first entry with the same name.

        Args:
            name: (Ident | None) Entry name, None for an anonymous slot
            value: (Word) Entry value

        Returns:
            (int) Address of the new entry

        Raises:
            DictionaryOverflow: The dictionary is full
        """
        if name is not None:
            for index, (stored, _) in enumerate(self._entries):
                if stored is not None and stored == name:
                    del self._entries[index]
                    break

        address = len(self._entries)
        if address >= self.capacity:
            raise DictionaryOverflow(self.capacity)
        self._entries.append((name, value))
        return address

    def get(self, name):
        """Value of the first entry named `name`, or None."""
        address = self.get_addr(name)
        if address is None:
            return None
        return self._entries[address][1]

    def get_addr(self, name):
        """Address of the first entry named `name`, or None."""
        for address, (stored, _) in enumerate(self._entries):
            if stored is not None and stored == name:
                return address
        return None

    def get_from_addr(self, address):
        """The (name, value) entry at `address`, or None when out of range."""
        if 0 <= address < len(self._entries):
            return self._entries[address]
        return None

    def set_from_addr(self, address, value):
        """Replace the value at `address`, keeping the entry's name.

        Raises:
            DictionaryUndefinedAccess: No entry exists at `address`
        """
        if not 0 <= address < len(self._entries):
            raise DictionaryUndefinedAccess(address)
        name = self._entries[address][0]
        self._entries[address] = (name, value)

    def clear(self):
        self._entries.clear()
