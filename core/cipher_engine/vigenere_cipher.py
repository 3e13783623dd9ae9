"""
Vigenère cipher — polyalphabetic substitution keyed by a word.

Historical note: Blaise de Vigenère, 1553. Not modern-secure, kept as
the classic step up from the Caesar shift.

The effective key is the upper-cased Latin letters of the user key.
The key cursor only advances on Latin letters, so spaces and
punctuation keep their position and do not consume key material.
"""

import logging

from .base          import CipherService
from .caesar_cipher import shift_letter
from .exceptions    import CryptoError

logger = logging.getLogger("CryptoTool.Vigenere")


def _is_latin(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


class VigenereCipher(CipherService):
    """Vigenère cipher over the 26-letter Latin alphabet."""

    def encrypt(self, data: str, key: str) -> str:
        return self._transform(data, key, direction=1)

    def decrypt(self, data: str, key: str) -> str:
        return self._transform(data, key, direction=-1)

    def _transform(self, data: str, key: str, direction: int) -> str:
        if not self.is_valid_key(key):
            logger.warning("Rejected Vigenère key")
            raise CryptoError.invalid_key("Vigenere")

        effective = self.effective_key(key)
        period    = len(effective)
        result    = []
        cursor    = 0
        for ch in data:
            if _is_latin(ch):
                shift = ord(effective[cursor % period]) - ord("A")
                result.append(shift_letter(ch, direction * shift))
                cursor += 1
            else:
                result.append(ch)
        return "".join(result)

    @staticmethod
    def effective_key(key: str) -> str:
        """Upper-case the key and keep only Latin letters."""
        # filter before upper(): "ß".upper() == "SS"
        return "".join(ch for ch in key if _is_latin(ch)).upper()

    @property
    def name(self) -> str:
        return "Vigenère Cipher"

    @property
    def description(self) -> str:
        return ("Polyalphabetic substitution cipher. Each letter is "
                "shifted by the amount given by the matching letter "
                "of the keyword. Stronger than the Caesar cipher.")

    @property
    def requires_text_safe_encoding(self) -> bool:
        return False

    def is_valid_key(self, key) -> bool:
        if not isinstance(key, str):
            return False
        return any(_is_latin(ch) for ch in key)

    @property
    def key_requirements(self) -> str:
        return "Keyword (Latin letters, at least 1 letter)"
