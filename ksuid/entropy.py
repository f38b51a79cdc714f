"""Random sources for KSUID payloads.

A random source is any object with a ``next()`` method returning an unsigned
64-bit integer. Tests and reproducible environments substitute their own.
"""

import random
import secrets

MASK_64 = (1 << 64) - 1


class SystemRandomSource:
    """Cryptographically strong source backed by the OS CSPRNG."""

    __slots__ = ()

    def next(self):
        return secrets.randbits(64)


class SeededRandomSource:
    """Reproducible source. Not suitable where ids must be unguessable."""

    __slots__ = ("seed", "_rng")

    def __init__(self, seed):
        self.seed = seed
        self._rng = random.Random(seed)

    def next(self):
        return self._rng.getrandbits(64)


def draw_payload(random_source, size=16):
    """Draw `size` bytes (a multiple of 8) from a 64-bit random source.

    Each value is written little-endian, so a source producing 123457 yields
    b"\\x41\\xe2\\x01\\x00\\x00\\x00\\x00\\x00".
    """
    chunks = []
    for _ in range(size // 8):
        chunks.append((random_source.next() & MASK_64).to_bytes(8, "little"))
    return b"".join(chunks)
