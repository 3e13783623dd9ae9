"""
Caesar cipher — single-alphabet substitution with a fixed shift.

Only Latin letters are rotated; digits, punctuation, whitespace and
letters of other scripts pass through unchanged.
"""

import logging
import re

from .base       import CipherService
from .exceptions import CryptoError

logger = logging.getLogger("CryptoTool.Caesar")

ALPHABET_SIZE = 26
_SHIFT_RE     = re.compile(r"([+-]?)0*([0-9]+)")


def shift_letter(ch: str, shift: int) -> str:
    """Rotate a Latin letter by *shift* inside its own case alphabet."""
    if "a" <= ch <= "z":
        base = ord("a")
    elif "A" <= ch <= "Z":
        base = ord("A")
    else:
        return ch
    pos = ord(ch) - base
    return chr(base + ((pos + shift) % ALPHABET_SIZE + ALPHABET_SIZE)
               % ALPHABET_SIZE)


class CaesarCipher(CipherService):
    """Shift every letter by a key between 1 and 25."""

    MIN_SHIFT = 1
    MAX_SHIFT = 25

    def encrypt(self, data: str, key: str) -> str:
        shift = self._parse_key(key)
        return "".join(shift_letter(ch, shift) for ch in data)

    def decrypt(self, data: str, key: str) -> str:
        shift = self._parse_key(key)
        return "".join(shift_letter(ch, -shift) for ch in data)

    def _parse_key(self, key: str) -> int:
        shift = self._shift_value(key)
        if shift is None:
            logger.warning("Rejected Caesar key")
            raise CryptoError.invalid_key("Caesar")
        return shift

    @property
    def name(self) -> str:
        return "Caesar Cipher"

    @property
    def description(self) -> str:
        return ("Classic substitution cipher with a fixed shift. "
                "Every letter moves a fixed number of positions "
                "along the alphabet.")

    @property
    def requires_text_safe_encoding(self) -> bool:
        return False

    def is_valid_key(self, key) -> bool:
        return self._shift_value(key) is not None

    def _shift_value(self, key) -> int | None:
        if not isinstance(key, str):
            return None
        match = _SHIFT_RE.fullmatch(key.strip())
        if not match:
            return None
        sign, digits = match.groups()
        # int() refuses digit strings past sys.get_int_max_str_digits()
        if sign == "-" or len(digits) > 2:
            return None
        shift = int(digits)
        if not self.MIN_SHIFT <= shift <= self.MAX_SHIFT:
            return None
        return shift

    @property
    def key_requirements(self) -> str:
        return (f"Integer from {self.MIN_SHIFT} to {self.MAX_SHIFT} "
                f"(shift)")
