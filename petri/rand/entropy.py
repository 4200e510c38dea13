"""
Seed entropy for unseeded generators.

Hashes a high-resolution clock sample together with the identity of
the calling thread, so two generators created without coordination
start from different states with overwhelming probability. Nothing
here is suitable for cryptographic use.
"""
import hashlib
import threading
import time

MASK64 = (1 << 64) - 1


def generate_entropy() -> int:
    """
    Derive a 64-bit seed from the clock and the current thread.

    Returns:
        An odd 64-bit integer.
    """
    hasher = hashlib.blake2b(digest_size=8)
    hasher.update(time.perf_counter_ns().to_bytes(16, 'little', signed=True))
    hasher.update(threading.get_ident().to_bytes(16, 'little', signed=False))
    value = int.from_bytes(hasher.digest(), 'little')
    return ((value << 1) | 1) & MASK64
