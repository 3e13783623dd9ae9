"""
CryptoTool Cipher Engine — classical and block ciphers behind one
text-in / text-out contract.
"""

from .exceptions import (
    ErrorKind, CryptoError, InvalidKeyError, CorruptedDataError,
    DecryptionFailedError, AlgorithmNotFoundError, InternalCryptoError,
    UnsupportedKeySizeError,
)

# ── Unified cipher system ────────────────────────────────────────
from .base            import CipherService
from .caesar_cipher   import CaesarCipher
from .vigenere_cipher import VigenereCipher
from .aes_cipher      import AESCipher, KeySize
from .cipher_manager  import CipherManager

__all__ = [
    # Errors
    "ErrorKind", "CryptoError", "InvalidKeyError", "CorruptedDataError",
    "DecryptionFailedError", "AlgorithmNotFoundError",
    "InternalCryptoError", "UnsupportedKeySizeError",
    # Unified interface
    "CipherService", "CipherManager",
    # Individual ciphers
    "CaesarCipher", "VigenereCipher", "AESCipher", "KeySize",
]
