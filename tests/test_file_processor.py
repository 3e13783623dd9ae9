"""
CryptoTool — File Encryption Test Suite
=======================================
"""

import pytest

from config.settings import Settings
from core.cipher_engine import (
    CipherManager, ErrorKind, InvalidKeyError, CorruptedDataError,
)
from utils.file_processor import FileProcessor, FileProcessingError

KEYS = {"CAESAR": "7", "VIGENERE": "Secret", "AES": "0123456789abcdef"}
BINARY = bytes(range(256)) * 4


@pytest.fixture
def processor():
    return FileProcessor(CipherManager())


@pytest.mark.parametrize("algorithm", list(KEYS))
def test_file_roundtrip_binary(processor, tmp_path, algorithm):
    src = tmp_path / "photo.bin"
    src.write_bytes(BINARY)

    enc = processor.encrypt_file(src, algorithm, KEYS[algorithm])
    assert enc.name == "photo.bin.enc"
    assert enc.read_text(encoding="utf-8")                # text on disk

    src.unlink()
    out = processor.decrypt_file(enc, algorithm, KEYS[algorithm])
    assert out == src
    assert out.read_bytes() == BINARY

def test_encrypted_file_hides_content(processor, tmp_path):
    src = tmp_path / "note.txt"
    src.write_text("attack at dawn", encoding="utf-8")
    enc = processor.encrypt_file(src, "AES", KEYS["AES"])
    assert "attack" not in enc.read_text(encoding="utf-8")

def test_decrypt_with_wrong_key(processor, tmp_path):
    src = tmp_path / "note.txt"
    src.write_text("attack at dawn", encoding="utf-8")
    enc = processor.encrypt_file(src, "AES", KEYS["AES"])
    with pytest.raises(CorruptedDataError):
        processor.decrypt_file(enc, "AES", "fedcba9876543210")

def test_invalid_key_propagates(processor, tmp_path):
    src = tmp_path / "note.txt"
    src.write_text("x", encoding="utf-8")
    with pytest.raises(InvalidKeyError):
        processor.encrypt_file(src, "CAESAR", "99")
    assert not (tmp_path / "note.txt.enc").exists()


# ── Validation ───────────────────────────────────────────────────────────────
def test_missing_file(processor, tmp_path):
    with pytest.raises(FileProcessingError) as info:
        processor.encrypt_file(tmp_path / "nope.txt", "CAESAR", "3")
    assert info.value.kind is ErrorKind.INVALID_INPUT

def test_directory_rejected(processor, tmp_path):
    with pytest.raises(FileProcessingError):
        processor.encrypt_file(tmp_path, "CAESAR", "3")

def test_empty_file(processor, tmp_path):
    src = tmp_path / "empty.txt"
    src.write_bytes(b"")
    with pytest.raises(FileProcessingError, match="empty"):
        processor.encrypt_file(src, "CAESAR", "3")

def test_file_too_large(tmp_path):
    processor = FileProcessor(CipherManager(), max_file_size=10)
    src = tmp_path / "big.txt"
    src.write_bytes(b"x" * 11)
    with pytest.raises(FileProcessingError, match="too large"):
        processor.encrypt_file(src, "CAESAR", "3")

def test_explicit_zero_limit_is_kept(tmp_path):
    processor = FileProcessor(CipherManager(), max_file_size=0)
    assert processor.max_file_size == 0
    src = tmp_path / "one.txt"
    src.write_bytes(b"x")
    with pytest.raises(FileProcessingError, match="too large"):
        processor.encrypt_file(src, "CAESAR", "3")

def test_default_limit_from_settings():
    assert FileProcessor(CipherManager()).max_file_size == Settings.MAX_FILE_SIZE

def test_decrypt_requires_enc_extension(processor, tmp_path):
    src = tmp_path / "plain.txt"
    src.write_text("hello", encoding="utf-8")
    with pytest.raises(FileProcessingError, match=".enc"):
        processor.decrypt_file(src, "CAESAR", "3")

def test_decrypt_non_text_file(processor, tmp_path):
    src = tmp_path / "blob.enc"
    src.write_bytes(b"\xff\xfe\x00\x81")
    with pytest.raises(CorruptedDataError):
        processor.decrypt_file(src, "CAESAR", "3")

def test_decrypt_letter_cipher_garbage(processor, tmp_path):
    src = tmp_path / "junk.enc"
    src.write_text("this is not base64!", encoding="utf-8")
    with pytest.raises(CorruptedDataError):
        processor.decrypt_file(src, "CAESAR", "3")


# ── Helpers ──────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("name,expected", [
    ("report.pdf.enc", "report.pdf"),
    ("REPORT.ENC",     "REPORT"),
    ("archive.enc.enc", "archive.enc"),
    (".enc",           ".enc.decrypted"),
    ("plain.txt",      "plain.txt.decrypted"),
])
def test_restore_original_file_name(tmp_path, name, expected):
    restored = FileProcessor.restore_original_file_name(tmp_path / name)
    assert restored == tmp_path / expected

def test_is_encrypted_file():
    assert FileProcessor.is_encrypted_file("a.txt.enc")
    assert FileProcessor.is_encrypted_file("A.ENC")
    assert not FileProcessor.is_encrypted_file("a.txt")

@pytest.mark.parametrize("size,expected", [
    (0, "0 B"),
    (1023, "1023 B"),
    (1024, "1.0 KB"),
    (1536, "1.5 KB"),
    (5 * 1024 * 1024, "5.0 MB"),
])
def test_format_file_size(size, expected):
    assert FileProcessor.format_file_size(size) == expected
