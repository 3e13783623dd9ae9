"""
Encrypt / decrypt whole files through the CipherManager.

File bytes are Base64-encoded to text before encryption so the
letter ciphers can process binary files too. Encrypted files get the
".enc" extension; decryption restores the original name.
"""

import logging
import os
from pathlib import Path

from config.settings import Settings
from core.cipher_engine.exceptions import CryptoError, ErrorKind
from utils.framing import Framing

logger = logging.getLogger("CryptoTool.FileProcessor")


class FileProcessingError(CryptoError):
    """Input file failed validation (missing, empty, too big, wrong type)."""

    kind = ErrorKind.INVALID_INPUT


class FileProcessor:

    def __init__(self, manager, max_file_size: int | None = None):
        self.manager       = manager
        self.max_file_size = (Settings.MAX_FILE_SIZE if max_file_size is None
                              else max_file_size)

    # ── public API ───────────────────────────────────────────────
    def encrypt_file(self, input_path, algorithm: str, key: str) -> Path:
        path = Path(input_path)
        self._validate(path)

        encoded   = Framing.to_text(path.read_bytes())
        encrypted = self.manager.encrypt(algorithm, encoded, key)

        output = path.with_name(path.name + Settings.ENCRYPTED_EXTENSION)
        output.write_text(encrypted, encoding="utf-8")
        logger.info("Encrypted %s → %s (%s)", path.name, output.name,
                    algorithm.upper())
        return output

    def decrypt_file(self, input_path, algorithm: str, key: str) -> Path:
        path = Path(input_path)
        self._validate(path)
        if not self.is_encrypted_file(path):
            raise FileProcessingError(
                f"File is not encrypted (missing "
                f"{Settings.ENCRYPTED_EXTENSION} extension): {path.name}"
            )

        try:
            encrypted = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise CryptoError.corrupted_data("file is not text") from exc

        decoded = self.manager.decrypt(algorithm, encrypted, key)
        try:
            plain = Framing.from_text(decoded)
        except ValueError as exc:
            raise CryptoError.corrupted_data(str(exc)) from exc

        output = self.restore_original_file_name(path)
        output.write_bytes(plain)
        logger.info("Decrypted %s → %s (%s)", path.name, output.name,
                    algorithm.upper())
        return output

    # ── helpers ──────────────────────────────────────────────────
    def _validate(self, path: Path):
        if not path.is_file():
            raise FileProcessingError(f"File does not exist: {path.name}")
        size = path.stat().st_size
        if size > self.max_file_size:
            raise FileProcessingError(
                f"File too large: {self.format_file_size(size)}. "
                f"Maximum: {self.format_file_size(self.max_file_size)}"
            )
        if size == 0:
            raise FileProcessingError(f"File is empty: {path.name}")

    @staticmethod
    def is_encrypted_file(path) -> bool:
        return os.fspath(path).lower().endswith(Settings.ENCRYPTED_EXTENSION)

    @staticmethod
    def restore_original_file_name(path) -> Path:
        path = Path(path)
        ext  = Settings.ENCRYPTED_EXTENSION
        stem = path.name[:-len(ext)]
        if path.name.lower().endswith(ext) and stem:
            return path.with_name(stem)
        return path.with_name(path.name + Settings.DECRYPTED_SUFFIX)

    @staticmethod
    def format_file_size(size: int) -> str:
        if size < 1024:
            return f"{size} B"
        if size < 1024 * 1024:
            return f"{size / 1024:.1f} KB"
        return f"{size / (1024 * 1024):.1f} MB"
