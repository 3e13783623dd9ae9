"""
CipherManager — single entry point for every cipher in CryptoTool.

Usage:
    manager = CipherManager()
    encrypted = manager.encrypt("CAESAR", "Hello World", "3")
    plaintext = manager.decrypt("CAESAR", encrypted, "3")

    # List all available algorithms
    for name in manager.list_algorithms():
        print(manager.describe(name))

Thread safety: the only mutable state is the AES key size. The manager
does no locking of its own; callers that share one manager across
threads must serialise set_aes_key_size() against encrypt()/decrypt()
(one lock around the manager, or one manager per session).
"""

import logging

from config.settings import Settings
from utils.framing   import Framing

from .base            import CipherService
from .aes_cipher      import AESCipher, KeySize
from .caesar_cipher   import CaesarCipher
from .vigenere_cipher import VigenereCipher
from .exceptions      import AlgorithmNotFoundError, CryptoError

logger = logging.getLogger("CryptoTool.CipherManager")


class CipherManager:
    """
    Facade over the registered ciphers.

    The manager handles:
    - Case-insensitive lookup by identifier
    - Key validation before delegating to a cipher
    - Base64 framing for ciphers with binary output
    """

    # ── Registry ─────────────────────────────────────────────────
    # identifier → cipher class, in display order
    _REGISTRY: dict[str, type[CipherService]] = {
        "CAESAR":   CaesarCipher,
        "VIGENERE": VigenereCipher,
        "AES":      AESCipher,
    }

    AES_ID = "AES"

    def __init__(self):
        self._algorithms: dict[str, CipherService] = {
            name: cls() for name, cls in self._REGISTRY.items()
        }
        self.set_aes_key_size(Settings.DEFAULT_AES_KEY_BITS)
        logger.debug("Registered algorithms: %s",
                     ", ".join(self._algorithms))

    # ── Encrypt / decrypt ────────────────────────────────────────

    def encrypt(self, algorithm: str, data: str, key: str) -> str:
        """
        Encrypt *data* with the named algorithm.

        Raises
        ------
        AlgorithmNotFoundError
            Unknown identifier.
        InvalidKeyError
            Key rejected by the cipher's is_valid_key().
        InternalCryptoError
            Failure inside the block-cipher primitive.
        """
        cipher = self.get_algorithm(algorithm)
        self._check_key(algorithm, cipher, key)

        logger.debug("Encrypting %d chars with %s", len(data), cipher.name)
        encrypted = cipher.encrypt(data, key)

        # AES output is Base64 already; it is encoded a second time
        # here and decrypt() strips both layers.
        if cipher.requires_text_safe_encoding:
            return Framing.to_text(encrypted.encode("utf-8"))
        return encrypted

    def decrypt(self, algorithm: str, data: str, key: str) -> str:
        """
        Decrypt *data* produced by encrypt() with the same algorithm.

        Raises
        ------
        AlgorithmNotFoundError, InvalidKeyError
            As for encrypt().
        CorruptedDataError
            Malformed framing, or decryption/padding failure.
        """
        cipher = self.get_algorithm(algorithm)
        self._check_key(algorithm, cipher, key)

        if cipher.requires_text_safe_encoding:
            try:
                data = Framing.from_text(data).decode("ascii")
            except ValueError as exc:     # also UnicodeDecodeError
                raise CryptoError.corrupted_data(str(exc)) from exc

        logger.debug("Decrypting %d chars with %s", len(data), cipher.name)
        return cipher.decrypt(data, key)

    def _check_key(self, algorithm: str, cipher: CipherService, key: str):
        if not cipher.is_valid_key(key):
            logger.warning("Invalid key for %s", algorithm)
            raise CryptoError.invalid_key(algorithm)

    # ── Lookup ───────────────────────────────────────────────────

    @staticmethod
    def _normalise(algorithm) -> str:
        return algorithm.strip().upper() if isinstance(algorithm, str) else ""

    def get_algorithm(self, algorithm: str) -> CipherService:
        cipher = self._algorithms.get(self._normalise(algorithm))
        if cipher is None:
            raise AlgorithmNotFoundError(algorithm, self.list_algorithms())
        return cipher

    def is_available(self, algorithm: str) -> bool:
        return self._normalise(algorithm) in self._algorithms

    def is_valid_key(self, algorithm: str, key: str) -> bool:
        return self.get_algorithm(algorithm).is_valid_key(key)

    def key_requirements(self, algorithm: str) -> str:
        return self.get_algorithm(algorithm).key_requirements

    # ── Discovery ────────────────────────────────────────────────

    def list_algorithms(self) -> list[str]:
        """Return all registered identifiers in registration order."""
        return list(self._algorithms)

    def describe(self, algorithm: str) -> dict | None:
        """Return metadata for an algorithm, or None if unknown."""
        cipher = self._algorithms.get(self._normalise(algorithm))
        if cipher is None:
            return None
        return {"id": self._normalise(algorithm), **cipher.info()}

    def get_all_info(self) -> list[dict]:
        """Return metadata for all algorithms (for GUI table)."""
        return [self.describe(name) for name in self.list_algorithms()]

    # ── AES configuration ────────────────────────────────────────

    def _aes(self) -> AESCipher:
        cipher = self._algorithms.get(self.AES_ID)
        if not isinstance(cipher, AESCipher):
            raise AlgorithmNotFoundError(self.AES_ID)
        return cipher

    def get_aes_key_size(self) -> KeySize:
        return self._aes().key_size

    def set_aes_key_size(self, key_size: KeySize | int):
        """
        Accepts a KeySize or its bit count (128 / 192 / 256).

        Raises UnsupportedKeySizeError for any other bit count.
        """
        if not isinstance(key_size, KeySize):
            key_size = KeySize.from_bits(key_size)
        self._aes().key_size = key_size

    def generate_aes_key(self) -> str:
        return self._aes().generate_key()

    def generate_aes_readable_key(self) -> str:
        return self._aes().generate_readable_key()
