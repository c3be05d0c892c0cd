"""Columnar transposition cipher driven by a numeric permutation key."""

from transposition.key import Key, KeyErrorKind, InvalidKeyError, validate, is_valid_key
from transposition.codec import TranspositionCodec, encrypt, decrypt, grid_shape

__version__ = "1.0.0"

__all__ = [
    "Key",
    "KeyErrorKind",
    "InvalidKeyError",
    "validate",
    "is_valid_key",
    "TranspositionCodec",
    "encrypt",
    "decrypt",
    "grid_shape",
]
