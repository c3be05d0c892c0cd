"""
Key validation for the columnar transposition cipher.

A key is a string of decimal digits naming the order in which grid
columns are read out. "3120" means: column 3 first, then 1, 2 and 0.

Rules, checked in order (the first violation is reported):
- fewer than MAX_KEY_LENGTH characters
- only the ASCII digits 0-9
- no digit repeated
- every index 0..len-1 present
"""

import enum
import string
from dataclasses import dataclass
from typing import Tuple

# Exclusive upper bound on key length; keeps every column index single-digit.
MAX_KEY_LENGTH = 10


class KeyErrorKind(enum.Enum):
    KEY_TOO_LONG = "key too long"
    NOT_NUMERIC = "not numeric"
    REPEATED_DIGIT = "repeated digit"
    MISSING_DIGIT = "missing digit"


class InvalidKeyError(ValueError):
    """Raised by validate(); `kind` tells which rule the key broke."""

    def __init__(self, kind: KeyErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class Key:
    digits: Tuple[int, ...]

    def __post_init__(self):
        # Frozen, so bypass __setattr__ to store the normalized tuple
        object.__setattr__(self, "digits", tuple(self.digits))
        if not 0 < len(self.digits) < MAX_KEY_LENGTH:
            raise InvalidKeyError(
                KeyErrorKind.KEY_TOO_LONG if self.digits else KeyErrorKind.NOT_NUMERIC,
                f"A key needs between 1 and {MAX_KEY_LENGTH - 1} digits, got {len(self.digits)}.",
            )
        if not all(isinstance(d, int) for d in self.digits):
            raise InvalidKeyError(KeyErrorKind.NOT_NUMERIC, f"Key digits must be integers: {self.digits!r}.")
        if len(set(self.digits)) != len(self.digits):
            raise InvalidKeyError(KeyErrorKind.REPEATED_DIGIT, f"Key digits repeat: {self.digits!r}.")
        if sorted(self.digits) != list(range(len(self.digits))):
            raise InvalidKeyError(
                KeyErrorKind.MISSING_DIGIT,
                f"Key digits must be a permutation of 0..{len(self.digits) - 1}: {self.digits!r}.",
            )

    @property
    def length(self) -> int:
        return len(self.digits)

    def __str__(self) -> str:
        return "".join(str(d) for d in self.digits)


def _check_length(raw: str):
    if not len(raw) < MAX_KEY_LENGTH:
        raise InvalidKeyError(
            KeyErrorKind.KEY_TOO_LONG,
            f"Key is too long. Only keys shorter than {MAX_KEY_LENGTH} digits are allowed.",
        )


def _check_numeric(raw: str):
    # str.isdigit() would also accept superscripts and other scripts' digits
    if not raw or any(c not in string.digits for c in raw):
        raise InvalidKeyError(KeyErrorKind.NOT_NUMERIC, f"Key '{raw}' is not a number.")


def _check_repeats(raw: str):
    for i, digit in enumerate(raw[:-1]):
        if digit in raw[i + 1:]:
            raise InvalidKeyError(
                KeyErrorKind.REPEATED_DIGIT,
                f"Cannot have recurring numbers (digit {digit} repeats).",
            )


def _check_complete(raw: str):
    for i in range(len(raw)):
        if str(i) not in raw:
            raise InvalidKeyError(
                KeyErrorKind.MISSING_DIGIT,
                f"Each digit from 0 to {len(raw) - 1} must appear in the key (missing {i}).",
            )


def validate(raw: str) -> Key:
    """
    Turn a raw key string into a Key.

    Raises:
        InvalidKeyError: for the first rule the string breaks.
    """
    _check_length(raw)
    _check_numeric(raw)
    _check_repeats(raw)
    _check_complete(raw)
    return Key(digits=tuple(int(c) for c in raw))


def is_valid_key(raw: str) -> bool:
    try:
        validate(raw)
    except InvalidKeyError:
        return False
    return True
