"""
Abstract base class for all ciphers in CryptoTool.

Every algorithm (Caesar, Vigenère, AES …) implements this interface
so the CipherManager, the file processor and the GUI can treat them
uniformly.
"""

from abc import ABC, abstractmethod


class CipherService(ABC):
    """
    Uniform text-in / text-out cipher contract.

    encrypt() and decrypt() must reject an invalid key with
    InvalidKeyError before touching the data.
    """

    @abstractmethod
    def encrypt(self, data: str, key: str) -> str:
        """Encrypt text with *key* → ciphertext text."""

    @abstractmethod
    def decrypt(self, data: str, key: str) -> str:
        """Decrypt text produced by encrypt() with the same *key*."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name, e.g. 'AES-128 Encryption'."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description of the algorithm."""

    @property
    @abstractmethod
    def requires_text_safe_encoding(self) -> bool:
        """True if the output is binary and must travel as Base64."""

    @abstractmethod
    def is_valid_key(self, key) -> bool:
        """Total predicate: never raises, False for None / non-str."""

    @property
    @abstractmethod
    def key_requirements(self) -> str:
        """Key format hint for the current configuration."""

    def info(self) -> dict:
        """Return cipher metadata for GUI display."""
        return {
            "name":                        self.name,
            "description":                 self.description,
            "key_requirements":            self.key_requirements,
            "requires_text_safe_encoding": self.requires_text_safe_encoding,
        }
