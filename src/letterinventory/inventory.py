"""Module for the LetterInventory class."""

import re
from array import array
from collections.abc import Iterator, Mapping

from bitarray import bitarray
from bitarray.util import zeros

from letterinventory.config import MAX_COUNT
from letterinventory.config import config as inventory_config
from letterinventory.errors import CounterOverflow, InvalidArgument, InvalidCharacter

ALPHABET_SIZE = 26
"""Number of letters tracked by an inventory."""

VALID_BODY_PATTERN = re.compile(r"[a-z]*")
"""Regex pattern for the text between the brackets of a rendered inventory."""


class LetterInventory:
    """A count of how many times each letter a-z occurs.

    Case is ignored, so 'S' and 's' are the same letter. For example, the inventory
    for "WashingtonState" renders as `[aaeghinnosstttw]`, with counts

        [2,0,0,0,1,0,1,1,1,0,0,0,0,2,1,0,0,0,2,3,0,0,1,0,0,0]
         a b c d e f g h i j k l m n o p q r s t u v w x y z
    """

    def __init__(self, text: str = "", *, max_count: int | None = None) -> None:
        """Create an inventory and add each character of `text` to it.

        Args:
            text: Letters to count. Any other character raises `InvalidCharacter`.
            max_count: Maximum count per letter. If None (default), uses the configured
                value (`LETTER_INVENTORY_MAX_COUNT`, 65535 unless set).

        Raises:
            InvalidCharacter: If `text` contains a character outside a-z and A-Z.
            CounterOverflow: If a letter occurs more than `max_count` times.
            InvalidArgument: If `max_count` is outside 1..65535.
        """
        if max_count is None:
            max_count = inventory_config.max_count
        if not 1 <= max_count <= MAX_COUNT:
            raise InvalidArgument(f"max_count must be between 1 and {MAX_COUNT}, got {max_count}")

        self.max_count: int = max_count
        """Maximum count any single letter may reach."""

        self.counts: "array[int]" = array("H", [0] * ALPHABET_SIZE)
        """Array of 26 unsigned 2-byte integers; index i counts letter 'a' + i."""

        for ch in text:
            self.add(ch)

    @staticmethod
    def index_of(ch: str) -> int:
        """Return the 0-based alphabet position of a letter.

        For example, 'c' and 'C' both give 2.

        Raises:
            InvalidCharacter: If `ch` is not a single character in a-z or A-Z.
        """
        if isinstance(ch, str) and len(ch) == 1:
            if "a" <= ch <= "z":
                return ord(ch) - ord("a")
            if "A" <= ch <= "Z":
                return ord(ch) - ord("A")
        raise InvalidCharacter(ch)

    def add(self, ch: str) -> None:
        """Increase the count of a letter by one."""
        index = self.index_of(ch)
        if self.counts[index] >= self.max_count:
            raise CounterOverflow(chr(ord("a") + index), self.max_count)
        self.counts[index] += 1

    def subtract(self, ch: str) -> None:
        """Decrease the count of a letter by one. A count of zero stays at zero."""
        index = self.index_of(ch)
        if self.counts[index] > 0:
            self.counts[index] -= 1

    def get(self, ch: str) -> int:
        """Return the count of a letter."""
        return self.counts[self.index_of(ch)]

    def set(self, ch: str, count: int) -> None:
        """Overwrite the count of a letter.

        Only positive counts are accepted, so `set` cannot clear a letter; use
        `subtract` for that.

        Raises:
            InvalidArgument: If `count` is zero or negative.
            InvalidCharacter: If `ch` is not a letter.
            CounterOverflow: If `count` exceeds `max_count`.
        """
        if count <= 0:
            raise InvalidArgument(f"count must be positive, got {count}")
        index = self.index_of(ch)
        if count > self.max_count:
            raise CounterOverflow(chr(ord("a") + index), self.max_count)
        self.counts[index] = count

    def contains(self, ch: str) -> bool:
        """Return whether the count of a letter is above zero."""
        return self.counts[self.index_of(ch)] > 0

    def size(self) -> int:
        """Return the total of all letter counts."""
        return sum(self.counts)

    def is_empty(self) -> bool:
        """Return whether every letter count is zero."""
        return self.size() == 0

    def letters(self) -> Iterator[str]:
        """Yield each lowercase letter as many times as it is counted, in alphabetical order."""
        for index, count in enumerate(self.counts):
            yield from chr(ord("a") + index) * count

    def presence(self) -> bitarray:
        """Return a 26-bit mask where bit i is set if letter 'a' + i is present."""
        mask = zeros(ALPHABET_SIZE)
        for index, count in enumerate(self.counts):
            if count:
                mask[index] = 1
        return mask

    def covers(self, other: "LetterInventory") -> bool:
        """Return whether `other` can be formed from the letters in this inventory."""
        # Any letter present in other but missing here rules it out
        if (other.presence() & ~self.presence()).any():
            return False
        return all(mine >= theirs for mine, theirs in zip(self.counts, other.counts))

    def copy(self) -> "LetterInventory":
        """Generate a copy of the inventory."""
        clone = LetterInventory(max_count=self.max_count)
        clone.counts = self.counts.__copy__()
        return clone

    def to_dict(self) -> dict[str, int]:
        """Return a `{letter: count}` mapping of the letters present."""
        return {chr(ord("a") + index): count for index, count in enumerate(self.counts) if count}

    @classmethod
    def from_dict(
        cls, data: Mapping[str, int], *, max_count: int | None = None
    ) -> "LetterInventory":
        """Create an inventory from a `{letter: count}` mapping.

        Keys may be either case; counts must be positive (see `set`).
        """
        inventory = cls(max_count=max_count)
        for letter, count in data.items():
            inventory.set(letter, count)
        return inventory

    @classmethod
    def from_string(cls, rendered: str, *, max_count: int | None = None) -> "LetterInventory":
        """Parse the bracketed form produced by `str()`, e.g. `[aaaabkm]`.

        Raises:
            InvalidArgument: If the brackets are missing, the body holds anything but
                lowercase letters, or the letters are not in alphabetical order.
        """
        if len(rendered) < 2 or rendered[0] != "[" or rendered[-1] != "]":
            raise InvalidArgument(f"Inventory string must be enclosed in brackets: {rendered!r}")
        body = rendered[1:-1]
        if not VALID_BODY_PATTERN.fullmatch(body):
            raise InvalidArgument(f"Inventory string may only contain a-z: {rendered!r}")
        if any(prev > cur for prev, cur in zip(body, body[1:])):
            raise InvalidArgument(f"Inventory letters are not in alphabetical order: {rendered!r}")
        return cls(body, max_count=max_count)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, ch: str) -> bool:
        return self.contains(ch)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LetterInventory):
            return NotImplemented
        return self.counts == other.counts

    def __str__(self) -> str:
        """Returns the letters in alphabetical order surrounded by square brackets."""
        return "[" + "".join(self.letters()) + "]"

    def __repr__(self) -> str:
        return f"LetterInventory({''.join(self.letters())!r})"
