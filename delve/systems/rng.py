"""Domain-separated deterministic RNG using xxhash.

Every draw is a pure function of (seed, domain, key, counter), so a level
generated from the same seed is identical no matter what else consumed
randomness before it.
"""

from __future__ import annotations

import struct

import xxhash

from delve.core.enums import Domain


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator."""

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, counter: int) -> int:
        payload = struct.pack("<qiqq", self._seed, domain.value, key, counter)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, counter: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, counter) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, key: int, counter: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high) — high exclusive."""
        if high <= low:
            raise ValueError(f"empty range [{low}, {high})")
        f = self.next_float(domain, key, counter)
        return low + int(f * (high - low))

    def stream(self, domain: Domain, key: int = 0) -> RandomStream:
        return RandomStream(self, domain, key)


class RandomStream:
    """Sequential view over one (domain, key) lane of a DeterministicRNG.

    This is the random source the generator, spawner and AI consume:
    ``random()`` in [0, 1) and ``randrange(lo, hi)`` in [lo, hi).
    """

    __slots__ = ("_rng", "_domain", "_key", "_counter")

    def __init__(self, rng: DeterministicRNG, domain: Domain, key: int = 0) -> None:
        self._rng = rng
        self._domain = domain
        self._key = key
        self._counter = 0

    @property
    def draws(self) -> int:
        return self._counter

    def random(self) -> float:
        value = self._rng.next_float(self._domain, self._key, self._counter)
        self._counter += 1
        return value

    def randrange(self, low: int, high: int) -> int:
        value = self._rng.next_int(self._domain, self._key, self._counter, low, high)
        self._counter += 1
        return value
