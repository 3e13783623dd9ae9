"""
CryptoTool — AES-CBC Test Suite
===============================
"""

import base64

import pytest

from config.settings import Settings
from core.cipher_engine import (
    AESCipher, KeySize, InvalidKeyError, CorruptedDataError,
    DecryptionFailedError, InternalCryptoError, UnsupportedKeySizeError,
)
from utils.random_gen import SecureRandom

MSG    = "Secret!"
MSG_U  = "Grüße, Привет, 你好 🔐"
KEY16  = "0123456789abcdef"
KEY24  = "0123456789abcdef01234567"
KEY32  = "0123456789abcdef0123456789abcdef"


@pytest.fixture
def aes():
    return AESCipher()


# ── KeySize ──────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("size,bits,nbytes", [
    (KeySize.AES_128, 128, 16),
    (KeySize.AES_192, 192, 24),
    (KeySize.AES_256, 256, 32),
])
def test_key_size_bits_and_bytes(size, bits, nbytes):
    assert size.bits == bits
    assert size.bytes == nbytes == size.bits // 8
    assert KeySize.from_bits(bits) is size

def test_key_size_from_bits_rejects_unknown():
    with pytest.raises(UnsupportedKeySizeError) as info:
        KeySize.from_bits(512)
    assert isinstance(info.value, ValueError)
    assert "128" in str(info.value)

def test_key_size_setter_rejects_non_enum(aes):
    with pytest.raises(TypeError):
        aes.key_size = 256


# ── Round-trip ───────────────────────────────────────────────────────────────
def test_default_key_size_is_128(aes):
    assert aes.key_size is KeySize.AES_128

def test_roundtrip_128(aes):
    assert aes.decrypt(aes.encrypt(MSG, KEY16), KEY16) == MSG

def test_roundtrip_unicode(aes):
    assert aes.decrypt(aes.encrypt(MSG_U, KEY16), KEY16) == MSG_U

def test_roundtrip_empty_plaintext(aes):
    ct = aes.encrypt("", KEY16)
    assert len(base64.b64decode(ct)) == 32          # IV + one padding block
    assert aes.decrypt(ct, KEY16) == ""

@pytest.mark.parametrize("size,key", [
    (KeySize.AES_192, KEY24),
    (KeySize.AES_256, KEY32),
])
def test_roundtrip_other_sizes(aes, size, key):
    aes.key_size = size
    assert aes.decrypt(aes.encrypt(MSG, key), key) == MSG

def test_same_input_different_ciphertext(aes):
    ct1 = aes.encrypt(MSG, KEY16)
    ct2 = aes.encrypt(MSG, KEY16)
    assert ct1 != ct2
    assert aes.decrypt(ct1, KEY16) == aes.decrypt(ct2, KEY16) == MSG

def test_output_layout(aes):
    raw = base64.b64decode(aes.encrypt("A" * 20, KEY16), validate=True)
    # 16-byte IV followed by two padded blocks
    assert len(raw) == 16 + 32

def test_fresh_iv_every_call(aes, monkeypatch):
    ivs = []
    real = SecureRandom.generate_iv

    def spy(length=16):
        iv = real(length)
        ivs.append(iv)
        return iv

    monkeypatch.setattr(SecureRandom, "generate_iv", staticmethod(spy))
    ct = aes.encrypt(MSG, KEY16)
    aes.encrypt(MSG, KEY16)
    assert len(ivs) == 2 and ivs[0] != ivs[1]
    assert base64.b64decode(ct)[:16] == ivs[0]


# ── Key validation ───────────────────────────────────────────────────────────
@pytest.mark.parametrize("key", ["", "short", KEY16 + "x", KEY24, KEY32,
                                 None, b"0123456789abcdef", "é" * 16])
def test_invalid_keys_at_128(aes, key):
    assert aes.is_valid_key(key) is False

def test_multibyte_key_counts_bytes(aes):
    assert aes.is_valid_key("é" * 8) is True              # 16 UTF-8 bytes

def test_key_validity_follows_key_size(aes):
    assert aes.is_valid_key(KEY16)
    aes.key_size = KeySize.AES_256
    assert not aes.is_valid_key(KEY16)
    assert aes.is_valid_key(KEY32)

def test_invalid_key_raises(aes):
    with pytest.raises(InvalidKeyError):
        aes.encrypt(MSG, "short")
    with pytest.raises(InvalidKeyError):
        aes.decrypt("AAAA", "short")

def test_old_ciphertext_needs_old_size(aes):
    ct = aes.encrypt(MSG, KEY16)
    aes.key_size = KeySize.AES_256
    with pytest.raises(InvalidKeyError):
        aes.decrypt(ct, KEY16)
    aes.key_size = KeySize.AES_128
    assert aes.decrypt(ct, KEY16) == MSG


# ── Corruption / tamper ──────────────────────────────────────────────────────
@pytest.mark.parametrize("data", ["not base64!!", "AAAA", "", "Zm9v"])
def test_malformed_input(aes, data):
    with pytest.raises(CorruptedDataError) as info:
        aes.decrypt(data, KEY16)
    assert not isinstance(info.value, DecryptionFailedError)

def test_wrong_key_detected(aes):
    ct = aes.encrypt(MSG, KEY16)
    with pytest.raises(CorruptedDataError):
        aes.decrypt(ct, "fedcba9876543210")

def test_tampered_padding_detected(aes):
    raw = bytearray(base64.b64decode(aes.encrypt(MSG, KEY16)))
    # last IV byte lands on the final pad byte: 0x09 → 0x08
    raw[15] ^= 0x01
    with pytest.raises(DecryptionFailedError):
        aes.decrypt(base64.b64encode(bytes(raw)).decode(), KEY16)

@pytest.mark.parametrize("offset", [16, 24, 31])
def test_tampered_final_block_detected(aes, offset):
    raw = bytearray(base64.b64decode(aes.encrypt(MSG, KEY16)))
    raw[offset] ^= 0x80
    with pytest.raises(CorruptedDataError):
        aes.decrypt(base64.b64encode(bytes(raw)).decode(), KEY16)

def test_truncated_block_detected(aes):
    raw = base64.b64decode(aes.encrypt(MSG, KEY16))
    with pytest.raises(DecryptionFailedError):
        aes.decrypt(base64.b64encode(raw[:-1]).decode(), KEY16)

def test_iv_only_detected(aes):
    with pytest.raises(DecryptionFailedError):
        aes.decrypt(base64.b64encode(b"\x00" * 16).decode(), KEY16)


# ── Internal failures ────────────────────────────────────────────────────────
def test_random_source_failure_is_wrapped(aes, monkeypatch):
    def broken(length=16):
        raise OSError("entropy source unavailable")

    monkeypatch.setattr(SecureRandom, "generate_iv", staticmethod(broken))
    with pytest.raises(InternalCryptoError) as info:
        aes.encrypt(MSG, KEY16)
    assert isinstance(info.value.cause, OSError)
    assert info.value.__cause__ is info.value.cause


# ── Key generation ───────────────────────────────────────────────────────────
@pytest.mark.parametrize("size", list(KeySize))
def test_generate_key_is_base64_of_size(aes, size):
    aes.key_size = size
    raw = base64.b64decode(aes.generate_key(), validate=True)
    assert len(raw) == size.bytes

@pytest.mark.parametrize("size", list(KeySize))
def test_generate_readable_key(aes, size):
    aes.key_size = size
    key = aes.generate_readable_key()
    assert len(key) == size.bytes
    assert set(key) <= set(Settings.READABLE_KEY_ALPHABET)
    assert aes.is_valid_key(key)
    assert aes.generate_readable_key() != key

def test_generate_key_failure_is_wrapped(aes, monkeypatch):
    def broken(length):
        raise NotImplementedError("no urandom")

    monkeypatch.setattr(SecureRandom, "generate_bytes", staticmethod(broken))
    with pytest.raises(InternalCryptoError):
        aes.generate_key()


# ── Metadata ─────────────────────────────────────────────────────────────────
def test_metadata_follows_key_size(aes):
    assert aes.requires_text_safe_encoding is True
    assert aes.name == "AES-128 Encryption"
    assert "16 bytes" in aes.key_requirements
    aes.key_size = KeySize.AES_192
    assert aes.name == "AES-192 Encryption"
    assert "24 bytes" in aes.key_requirements
    assert "192" in aes.description
