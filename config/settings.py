import os
import string


class Settings:
    """Centralised application configuration."""

    # ── application ──────────────────────────────────────────────
    APP_NAME    = "CryptoTool"
    APP_VERSION = "1.0.0"

    # ── paths ────────────────────────────────────────────────────
    BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    LOG_FILE = os.path.join(BASE_DIR, "cryptotool.log")

    # ── crypto defaults ──────────────────────────────────────────
    DEFAULT_ALGORITHM    = "CAESAR"
    DEFAULT_AES_KEY_BITS = 128
    AES_IV_SIZE          = 16         # bytes, one AES block
    READABLE_KEY_ALPHABET = string.ascii_letters + string.digits

    # ── file processing ──────────────────────────────────────────
    MAX_FILE_SIZE       = 50 * 1024 * 1024     # 50 MiB
    ENCRYPTED_EXTENSION = ".enc"
    DECRYPTED_SUFFIX    = ".decrypted"

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL       = "INFO"
    LOG_TO_FILE     = False
    LOG_FORMAT      = "[%(asctime)s] [%(levelname)-8s] %(name)s — %(message)s"
    LOG_DATE_FORMAT = "%H:%M:%S"
