"""
Cryptographically-secure random value generators.

Everything here reads from the OS CSPRNG on every call; nothing is
seeded or cached.
"""

import os
import secrets


class SecureRandom:

    @staticmethod
    def generate_bytes(length: int) -> bytes:
        return os.urandom(length)

    @staticmethod
    def generate_iv(length: int = 16) -> bytes:
        return os.urandom(length)

    @staticmethod
    def generate_string(length: int, alphabet: str) -> str:
        """Return *length* characters drawn uniformly from *alphabet*."""
        if not alphabet:
            raise ValueError("Alphabet must not be empty")
        return "".join(secrets.choice(alphabet) for _ in range(length))
