"""
VIN Parser Exceptions
=====================

Typed errors raised by validation, checksum and lookup operations.

All errors derive from VINError (itself a ValueError), so callers can catch
the whole family or a single failure kind.
"""

from typing import FrozenSet, Iterable, Tuple


class VINError(ValueError):
    """Base exception for VIN parsing errors."""
    pass


class StructuralError(VINError):
    """Raised when a VIN has the wrong length or characters outside the alphabet."""
    pass


class IncorrectLength(StructuralError):
    """Raised when a VIN is not exactly 17 characters long."""

    def __init__(self, length: int, expected: int = 17):
        self.length = length
        self.expected = expected
        super().__init__(
            f"Incorrect length of given string: {length} chars received, "
            f"{expected} chars expected."
        )


class InvalidCharacters(StructuralError):
    """Raised when a VIN contains characters outside the legal alphabet."""

    def __init__(self, characters: Iterable[str], positions: Iterable[int]):
        self.characters: FrozenSet[str] = frozenset(characters)
        # 1-based, as VIN positions are usually quoted
        self.positions: Tuple[int, ...] = tuple(sorted(positions))
        super().__init__(
            f"Invalid characters received in given string: "
            f"{sorted(self.characters)} at positions {list(self.positions)}."
        )


class IllegalCharacter(VINError):
    """Raised when a character has no transliteration or year-code entry."""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"Character {character!r} at position {position} has no entry "
            f"in the lookup table."
        )


class ChecksumMismatch(VINError):
    """Raised when the computed check digit differs from position 9."""

    def __init__(self, expected: str, received: str):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Invalid checksum symbol on 9th place, {expected} expected, "
            f"{received} received."
        )


class UnknownManufacturer(VINError):
    """Raised when no 3-, 2- or 1-character WMI prefix is registered."""

    def __init__(self, wmi: str):
        self.wmi = wmi
        super().__init__(f"No registered manufacturer for WMI {wmi!r}.")
