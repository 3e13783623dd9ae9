"""
AES symmetric encryption — CBC mode with PKCS7 padding, 128 / 192 /
256-bit keys.

Output format (before Base64):  [IV 16B][ciphertext padded]

The caller's key is used as-is: its UTF-8 byte length must match the
active key size exactly. There is no key stretching or truncation.
The active key size is instance state; changing it only affects
calls made afterwards.
"""

import logging
from enum import Enum

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import padding as sym_padding

from config.settings  import Settings
from utils.framing    import Framing
from utils.random_gen import SecureRandom

from .base       import CipherService
from .exceptions import (
    CryptoError, DecryptionFailedError, InternalCryptoError,
    UnsupportedKeySizeError,
)

logger = logging.getLogger("CryptoTool.AES")


class KeySize(Enum):
    """Supported AES key sizes, valued in bits."""

    AES_128 = 128
    AES_192 = 192
    AES_256 = 256

    @property
    def bits(self) -> int:
        return self.value

    @property
    def bytes(self) -> int:
        return self.value // 8

    @classmethod
    def from_bits(cls, bits: int) -> "KeySize":
        try:
            return cls(bits)
        except ValueError:
            raise UnsupportedKeySizeError(bits, [k.bits for k in cls]) from None


class AESCipher(CipherService):
    """
    AES-CBC over UTF-8 text with a random IV per message.

    Not thread-safe with respect to ``key_size``: callers sharing one
    instance across threads must serialise writes to it.
    """
    IV_SIZE    = Settings.AES_IV_SIZE
    BLOCK_BITS = 128

    def __init__(self, key_size: KeySize = KeySize.AES_128):
        self._key_size = key_size

    # ── configuration ────────────────────────────────────────────
    @property
    def key_size(self) -> KeySize:
        return self._key_size

    @key_size.setter
    def key_size(self, key_size: KeySize):
        if not isinstance(key_size, KeySize):
            raise TypeError(f"Expected KeySize, got {type(key_size).__name__}")
        logger.debug("AES key size: %d → %d bits",
                     self._key_size.bits, key_size.bits)
        self._key_size = key_size

    # ── encrypt / decrypt ────────────────────────────────────────
    def encrypt(self, data: str, key: str) -> str:
        if not self.is_valid_key(key):
            logger.warning("Rejected AES key (expected %d bytes)",
                           self._key_size.bytes)
            raise CryptoError.invalid_key("AES")

        try:
            iv     = SecureRandom.generate_iv(self.IV_SIZE)
            padder = sym_padding.PKCS7(self.BLOCK_BITS).padder()
            padded = padder.update(data.encode("utf-8")) + padder.finalize()
            enc    = Cipher(
                algorithms.AES(key.encode("utf-8")), modes.CBC(iv)
            ).encryptor()
            ct     = enc.update(padded) + enc.finalize()
        except Exception as exc:
            raise InternalCryptoError("AES encryption", exc) from exc

        return Framing.to_text(Framing.create_frame(iv, ct))

    def decrypt(self, data: str, key: str) -> str:
        if not self.is_valid_key(key):
            logger.warning("Rejected AES key (expected %d bytes)",
                           self._key_size.bytes)
            raise CryptoError.invalid_key("AES")

        try:
            iv, ct = Framing.parse_frame(Framing.from_text(data))
        except ValueError as exc:
            raise CryptoError.corrupted_data(str(exc)) from exc

        try:
            dec = Cipher(
                algorithms.AES(key.encode("utf-8")), modes.CBC(iv)
            ).decryptor()
        except Exception as exc:
            raise InternalCryptoError("AES decryption", exc) from exc

        try:
            # ValueError: ciphertext not block aligned, or bad padding
            padded = dec.update(ct) + dec.finalize()
            unpad  = sym_padding.PKCS7(self.BLOCK_BITS).unpadder()
            plain  = unpad.update(padded) + unpad.finalize()
            return plain.decode("utf-8")
        except ValueError as exc:
            raise DecryptionFailedError(str(exc)) from exc

    # ── key generation ───────────────────────────────────────────
    def generate_key(self) -> str:
        """Random key of the active size, Base64-encoded."""
        try:
            raw = SecureRandom.generate_bytes(self._key_size.bytes)
        except Exception as exc:
            raise InternalCryptoError("Key generation", exc) from exc
        return Framing.to_text(raw)

    def generate_readable_key(self) -> str:
        """Random alphanumeric key usable directly as an AES key."""
        try:
            return SecureRandom.generate_string(
                self._key_size.bytes, Settings.READABLE_KEY_ALPHABET
            )
        except Exception as exc:
            raise InternalCryptoError("Readable key generation", exc) from exc

    # ── metadata ─────────────────────────────────────────────────
    @property
    def name(self) -> str:
        return f"AES-{self._key_size.bits} Encryption"

    @property
    def description(self) -> str:
        return ("Industry-standard symmetric block cipher with a "
                f"128-bit block and a {self._key_size.bits}-bit key. "
                "CBC mode with PKCS7 padding and a random IV per message.")

    @property
    def requires_text_safe_encoding(self) -> bool:
        return True

    def is_valid_key(self, key) -> bool:
        if not isinstance(key, str) or not key:
            return False
        try:
            return len(key.encode("utf-8")) == self._key_size.bytes
        except UnicodeEncodeError:      # lone surrogates
            return False

    @property
    def key_requirements(self) -> str:
        return (f"Key of {self._key_size.bytes} bytes in UTF-8, e.g. "
                f"{self._key_size.bytes} ASCII characters "
                f"({self._key_size.bits} bits)")
