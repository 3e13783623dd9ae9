import base64

import pytest

from utils.framing import Framing
from utils.random_gen import SecureRandom


# ── Framing ──────────────────────────────────────────────────────────────────
def test_frame_layout():
    iv, ct = b"\x01" * 16, b"\x02" * 32
    frame = Framing.create_frame(iv, ct)
    assert frame[:16] == iv
    assert Framing.parse_frame(frame) == (iv, ct)

def test_frame_rejects_bad_iv():
    with pytest.raises(ValueError):
        Framing.create_frame(b"\x00" * 8, b"")

def test_parse_short_frame():
    with pytest.raises(ValueError):
        Framing.parse_frame(b"\x00" * 15)
    assert Framing.parse_frame(b"\x00" * 16) == (b"\x00" * 16, b"")

def test_text_encoding_is_standard_base64():
    data = bytes(range(256))
    text = Framing.to_text(data)
    assert text == base64.b64encode(data).decode()
    assert Framing.from_text(text) == data

def test_from_text_strips_whitespace():
    assert Framing.from_text("  Zm9v\n") == b"foo"

@pytest.mark.parametrize("text", ["Zm9", "Zm 9v", "***", "Zm9v!", "Привет"])
def test_from_text_is_strict(text):
    with pytest.raises(ValueError):
        Framing.from_text(text)


# ── SecureRandom ─────────────────────────────────────────────────────────────
def test_random_lengths():
    assert len(SecureRandom.generate_bytes(24)) == 24
    assert len(SecureRandom.generate_iv()) == 16
    assert SecureRandom.generate_iv() != SecureRandom.generate_iv()

def test_random_string_uses_alphabet():
    s = SecureRandom.generate_string(200, "ab")
    assert len(s) == 200 and set(s) <= {"a", "b"}

def test_random_string_empty_alphabet():
    with pytest.raises(ValueError):
        SecureRandom.generate_string(4, "")
