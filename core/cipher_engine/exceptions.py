"""
Error family for the CryptoTool cipher engine.

Every failure raised by the engine is a ``CryptoError`` carrying an
explicit ``kind`` so the GUI and the file processor can branch on it
without string matching.
"""

from enum import Enum


class ErrorKind(Enum):
    INVALID_KEY         = "invalid_key"
    CORRUPTED_DATA      = "corrupted_data"
    ALGORITHM_NOT_FOUND = "algorithm_not_found"
    INTERNAL            = "internal"
    INVALID_INPUT       = "invalid_input"


class CryptoError(Exception):
    """Base class for every error raised by the cipher engine."""

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    # ── factory helpers ──────────────────────────────────────────
    @staticmethod
    def invalid_key(algorithm: str) -> "InvalidKeyError":
        return InvalidKeyError(algorithm)

    @staticmethod
    def corrupted_data(detail: str | None = None) -> "CorruptedDataError":
        return CorruptedDataError(detail)


class InvalidKeyError(CryptoError):
    kind = ErrorKind.INVALID_KEY

    def __init__(self, algorithm: str):
        super().__init__(
            f"Invalid key for algorithm {algorithm}. "
            f"Check the key length and format."
        )
        self.algorithm = algorithm


class CorruptedDataError(CryptoError):
    """Ciphertext could not be parsed (bad framing, truncated IV)."""

    kind = ErrorKind.CORRUPTED_DATA
    DEFAULT_MESSAGE = (
        "Data is corrupted or was encrypted with a different key"
    )

    def __init__(self, detail: str | None = None):
        message = self.DEFAULT_MESSAGE
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.detail = detail


class DecryptionFailedError(CorruptedDataError):
    """Well-formed input that failed block, padding or UTF-8 checks."""


class AlgorithmNotFoundError(CryptoError):
    kind = ErrorKind.ALGORITHM_NOT_FOUND

    def __init__(self, identifier: str, available: list[str] | None = None):
        message = f"Algorithm not found: {identifier}"
        if available:
            message += f". Available: {', '.join(available)}"
        super().__init__(message)
        self.identifier = identifier


class InternalCryptoError(CryptoError):
    """Unexpected failure inside the crypto primitive or random source."""

    kind = ErrorKind.INTERNAL

    def __init__(self, operation: str, cause: BaseException):
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause     = cause


class UnsupportedKeySizeError(CryptoError, ValueError):
    """Requested AES key size is not 128, 192 or 256 bits."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, bits, supported: list[int]):
        super().__init__(
            f"Unsupported AES key size: {bits} bits. "
            f"Expected one of {supported}"
        )
        self.bits = bits
