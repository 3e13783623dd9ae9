"""
Text-safe framing for binary ciphertexts.

Block-cipher output layout before encoding:
    [16 bytes – IV]
    [N bytes  – ciphertext, multiple of the block size]

The whole frame travels as standard Base64 text.
"""

import base64
import binascii


class Framing:
    IV_SIZE = 16

    @staticmethod
    def create_frame(iv: bytes, ciphertext: bytes) -> bytes:
        if len(iv) != Framing.IV_SIZE:
            raise ValueError(f"IV must be {Framing.IV_SIZE} bytes, got {len(iv)}")
        return iv + ciphertext

    @staticmethod
    def parse_frame(frame: bytes) -> tuple[bytes, bytes]:
        """Return *(iv, ciphertext)*."""
        if len(frame) < Framing.IV_SIZE:
            raise ValueError(
                f"Frame too short: {len(frame)} bytes, "
                f"need at least {Framing.IV_SIZE}"
            )
        return frame[:Framing.IV_SIZE], frame[Framing.IV_SIZE:]

    @staticmethod
    def to_text(data: bytes) -> str:
        return base64.b64encode(data).decode("ascii")

    @staticmethod
    def from_text(text: str) -> bytes:
        """Strict Base64 decode; raises ValueError on malformed input."""
        try:
            return base64.b64decode(text.strip(), validate=True)
        except (binascii.Error, ValueError) as exc:   # non-ASCII → ValueError
            raise ValueError(f"Invalid Base64: {exc}") from exc
