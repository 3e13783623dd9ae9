from .cipher_engine import CipherManager, CryptoError, KeySize

__all__ = ["CipherManager", "CryptoError", "KeySize"]
