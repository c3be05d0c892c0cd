"""
Reed-Solomon armor for ciphertext.

Protected ciphertext is carried as Unicode Braille patterns, one
character per byte (byte N -> U+2800 + N):

    [MAGIC_BYTE] [ECC_SYMBOLS] [RS_ENCODED_UTF8_CIPHERTEXT]

The magic byte lets decryption detect armor without being told.
"""

from typing import Tuple

from reedsolo import RSCodec, ReedSolomonError

from transposition.log import log_info

# ECC magic byte for auto-detection of error-corrected payloads
ECC_MAGIC_BYTE = 0xEC
# Armor is opt-in so plain ciphertext stays readable by other tools
DEFAULT_ECC_SYMBOLS = 0
# RS over GF(2^8) uses 255-byte codewords; at least one data byte must fit
MAX_ECC_SYMBOLS = 254

BRAILLE_BASE = 0x2800


class ArmorError(ValueError):
    pass


def _bytes_to_braille(data: bytes) -> str:
    return "".join(chr(BRAILLE_BASE + b) for b in data)


def _braille_to_bytes(text: str) -> bytes:
    return bytes(ord(c) - BRAILLE_BASE for c in text)


def _is_braille(char: str) -> bool:
    return BRAILLE_BASE <= ord(char) <= BRAILLE_BASE + 0xFF


def is_protected(text: str) -> bool:
    if len(text) < 2 or not all(_is_braille(c) for c in text):
        return False
    return ord(text[0]) - BRAILLE_BASE == ECC_MAGIC_BYTE


def protect(text: str, ecc_symbols: int) -> str:
    """Add ECC to ciphertext. A symbol count of 0 or less leaves it untouched."""
    if ecc_symbols <= 0 or not text:
        return text
    if ecc_symbols > MAX_ECC_SYMBOLS:
        raise ArmorError(f"ECC symbols must be between 1 and {MAX_ECC_SYMBOLS}, got {ecc_symbols}.")

    rsc = RSCodec(ecc_symbols)
    encoded = rsc.encode(text.encode("utf-8"))
    return _bytes_to_braille(bytes([ECC_MAGIC_BYTE, ecc_symbols]) + bytes(encoded))


def recover(text: str) -> Tuple[str, int]:
    """
    Strip and repair armor.

    Returns:
        (ciphertext, errors_corrected). Text without armor is returned as-is
        with 0 corrections.

    Raises:
        ArmorError: if the payload is damaged beyond repair.
    """
    if not is_protected(text):
        return text, 0

    data = _braille_to_bytes(text)
    ecc_symbols = data[1]
    if not 0 < ecc_symbols <= MAX_ECC_SYMBOLS:
        raise ArmorError(f"Armor header names an invalid ECC symbol count ({ecc_symbols}).")

    try:
        decoded, _, errata_pos = RSCodec(ecc_symbols).decode(data[2:])
    except ReedSolomonError as e:
        raise ArmorError(f"ECC decode failed: {e}. Data may be corrupted beyond repair.") from e

    errors_corrected = len(errata_pos) if errata_pos else 0
    if errors_corrected:
        log_info(f"Corrected {errors_corrected} error(s) using Reed-Solomon.")

    try:
        return bytes(decoded).decode("utf-8"), errors_corrected
    except UnicodeDecodeError as e:
        raise ArmorError(f"Recovered data is not valid UTF-8: {e}") from e
