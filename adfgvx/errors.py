"""
Failure types raised by the ADFGVX engine.

Every failure the cipher can report has its own class so callers can tell a
bad key from a bad plaintext character from a bad cipher symbol without
parsing messages. All of them derive from `ValueError`, matching the rest of
the package where invalid input surfaces as `ValueError`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class KeyProblem(enum.Enum):
    TOO_SHORT = "too short"
    TOO_LONG = "too long"
    NOT_ALPHANUMERIC = "not alphanumeric"
    HAS_DUPLICATES = "has duplicate characters"


class ADFGVXError(ValueError):
    """Base class for every cipher failure."""


class InvalidKey(ADFGVXError):
    """Raised when a key fails validation; no transform work has started."""

    def __init__(self, key: str, reason: KeyProblem):
        self.key = key
        self.reason = reason
        super().__init__(f"The key {key!r} is {reason.value}")


class UnmappableCharacter(ADFGVXError):
    """Raised when a plaintext character is not in the Polybius square."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Character not in Polybius square: {char!r}")


class InvalidSymbol(ADFGVXError):
    """Raised when cipher text holds a character outside ADFGVX."""

    def __init__(self, char: str, count: int = 1):
        self.char = char
        self.count = count
        if count > 1:
            message = f"Found {count} invalid characters in the cipher text (first: {char!r})"
        else:
            message = f"Character not in the ADFGVX alphabet: {char!r}"
        super().__init__(message)


class TruncationWarning(UserWarning):
    """Trailing symbols were dropped to fit the transposition matrix."""


@dataclass(frozen=True)
class CipherResult:
    ok: bool
    text: Optional[str] = None
    error: Optional[ADFGVXError] = None


__all__ = [
    "ADFGVXError",
    "CipherResult",
    "InvalidKey",
    "InvalidSymbol",
    "KeyProblem",
    "TruncationWarning",
    "UnmappableCharacter",
]
