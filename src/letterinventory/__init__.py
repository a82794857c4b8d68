"""Letter Inventory.

Counts how many times each of the 26 English letters occurs in a piece of text,
ignoring case, and renders the result as its letters in alphabetical order
(e.g. "WashingtonState" gives `[aaeghinnosstttw]`).
"""

import sys

from .errors import CounterOverflow, InvalidArgument, InvalidCharacter
from .inventory import ALPHABET_SIZE, LetterInventory

__all__ = [
    "ALPHABET_SIZE",
    "CounterOverflow",
    "InvalidArgument",
    "InvalidCharacter",
    "LetterInventory",
    "main",
]


def main() -> None:
    """Main entry point: print the inventory of each command-line argument."""
    if len(sys.argv) < 2:
        print("Usage: python -m letterinventory <text> [<text> ...]")
        sys.exit(1)

    for text in sys.argv[1:]:
        try:
            inventory = LetterInventory(text)
        except (InvalidCharacter, CounterOverflow) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"{text} -> {inventory} ({inventory.size():,} letters)")
