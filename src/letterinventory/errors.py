"""Exceptions raised by letter inventories."""


class InvalidCharacter(ValueError):
    """Raised when a character is not an ASCII letter (a-z or A-Z)."""

    def __init__(self, character: object) -> None:
        self.character = character
        super().__init__(f"Character is not in the range a-z or A-Z: {character!r}")


class InvalidArgument(ValueError):
    """Raised for a bad count or a malformed inventory string."""


class CounterOverflow(ValueError):
    """Raised when a letter count would exceed the maximum."""

    def __init__(self, letter: str, max_count: int) -> None:
        self.letter = letter
        self.max_count = max_count
        super().__init__(f"Too many '{letter}'; maximum is {max_count}.")
