"""
CryptoTool — Cipher Verification Script

Run this to verify every algorithm works correctly:
    python verify_ciphers.py
"""

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from core.cipher_engine import (
    CipherManager, CryptoError, KeySize,
    AlgorithmNotFoundError, CorruptedDataError, InvalidKeyError,
)
from utils.log_setup import setup_logging

SAMPLE_KEYS = {
    "CAESAR":   "3",
    "VIGENERE": "LEMON",
}


def sample_key(manager: CipherManager, algorithm: str) -> str:
    if algorithm == CipherManager.AES_ID:
        return manager.generate_aes_readable_key()
    return SAMPLE_KEYS[algorithm]


def main() -> int:
    setup_logging(level="WARNING")
    manager = CipherManager()

    print("╔══════════════════════════════════════════════════╗")
    print("║      CryptoTool — Cipher Verification Suite      ║")
    print("╚══════════════════════════════════════════════════╝")
    print()

    for info in manager.get_all_info():
        print(f"  🎯 {info['id']:<9s} {info['name']}")
        print(f"     🔑 {info['key_requirements']}")
        print(f"     📊 Base64: "
              f"{'yes' if info['requires_text_safe_encoding'] else 'no'}")
    print()

    # ── Test 1: Round-trip ───────────────────────────────────────
    print("━━━ Test 1: Encrypt → Decrypt Round-Trip ━━━━━━━━━━")
    test_messages = [
        "Hello World",
        "ATTACKATDAWN",
        "Hello, World! 123",
        "Привет Мир",                           # passes through letter ciphers
        "A" * 10_000,
    ]
    all_pass = True

    for name in manager.list_algorithms():
        key = sample_key(manager, name)
        ok = True
        for msg in test_messages:
            try:
                encrypted = manager.encrypt(name, msg, key)
                if manager.decrypt(name, encrypted, key) != msg:
                    ok = False
                    break
            except CryptoError as exc:
                print(f"  ❌ {name:<10s} ERROR: {exc}")
                ok = False
                break
        print(f"  {'✅' if ok else '❌'} {name:<10s} "
              f"{'round-trip OK' if ok else 'FAILED'}")
        all_pass &= ok
    print()

    # ── Test 2: Every AES key size ───────────────────────────────
    print("━━━ Test 2: AES Key Sizes ━━━━━━━━━━━━━━━━━━━━━━━━━")
    for size in KeySize:
        manager.set_aes_key_size(size)
        key = manager.generate_aes_readable_key()
        ct  = manager.encrypt("AES", "Secret!", key)
        ok  = manager.decrypt("AES", ct, key) == "Secret!"
        print(f"  {'✅' if ok else '❌'} AES-{size.bits:<4d} "
              f"key={len(key)} chars")
        all_pass &= ok
    manager.set_aes_key_size(KeySize.AES_128)
    print()

    # ── Test 3: Tamper detection / wrong key ─────────────────────
    print("━━━ Test 3: Tamper & Wrong Key Rejection ━━━━━━━━━━")
    key1 = manager.generate_aes_readable_key()
    key2 = manager.generate_aes_readable_key()
    ct   = manager.encrypt("AES", "Test tamper detection", key1)
    checks = [
        ("wrong key", lambda: manager.decrypt("AES", ct, key2)),
        ("not base64", lambda: manager.decrypt("AES", "%%%", key1)),
    ]
    for label, call in checks:
        try:
            call()
            print(f"  ⚠️  {label:<12s} NOT detected!")
            all_pass = False
        except CorruptedDataError:
            print(f"  ✅ {label:<12s} rejected")
    print()

    # ── Test 4: Error handling ───────────────────────────────────
    print("━━━ Test 4: Error Handling ━━━━━━━━━━━━━━━━━━━━━━━━")
    checks = [
        ("unknown algorithm", AlgorithmNotFoundError,
         lambda: manager.encrypt("UNKNOWN", "x", "y")),
        ("caesar key 26", InvalidKeyError,
         lambda: manager.encrypt("CAESAR", "x", "26")),
        ("vigenere key 123", InvalidKeyError,
         lambda: manager.encrypt("VIGENERE", "x", "123")),
        ("aes short key", InvalidKeyError,
         lambda: manager.encrypt("AES", "x", "short")),
    ]
    for label, expected, call in checks:
        try:
            call()
            print(f"  ⚠️  {label:<18s} no error raised!")
            all_pass = False
        except expected as exc:
            print(f"  ✅ {label:<18s} {exc.kind.value}")
    print()

    print("━━━ Summary ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
    print(f"  Total algorithms tested: {len(manager.list_algorithms())}")
    if all_pass:
        print("  Result:                  🎉 ALL TESTS PASSED")
    else:
        print("  Result:                  ⚠️  SOME TESTS FAILED")
    print()
    return 0 if all_pass else 1


if __name__ == "__main__":
    sys.exit(main())
