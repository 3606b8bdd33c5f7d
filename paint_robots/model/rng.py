"""Re-seedable integer generators used to initialize the floor and robots."""

from collections import deque
from typing import Deque, Optional

import numpy as np

from ..errors import ConfigurationError


class GlibcRandom:
    """
    Reimplementation of the GNU C library ``srand``/``rand`` generator.

    glibc's default ``rand()`` is an additive lagged Fibonacci generator
    (TYPE_3, degree 31, separation 3):

        r[0]      = seed
        r[i]      = 16807 * r[i-1] mod (2^31 - 1)     for 1 <= i < 31
        r[i]      = r[i-31]                           for 31 <= i < 34
        r[i]      = r[i-31] + r[i-3]  mod 2^32        for i >= 34
        output_k  = r[k + 344] >> 1

    The first 310 generated words are discarded after seeding. Matching
    this exactly is what lets a run reproduce the C program's floors and
    robot placements for the same seed.
    """

    _MODULUS = 2147483647
    _SEPARATION = 3
    _DEGREE = 31
    _DISCARD = 310

    def __init__(self, seed: int = 1):
        self._state: Deque[int] = deque(maxlen=self._DEGREE + self._SEPARATION)
        self.seed(seed)

    @staticmethod
    def _to_int32(value: int) -> int:
        value &= 0xFFFFFFFF
        return value - (1 << 32) if value & 0x80000000 else value

    def seed(self, value: int) -> None:
        """Reset the generator exactly as ``srand(value)`` does."""
        value &= 0xFFFFFFFF
        if value == 0:
            value = 1

        self._state.clear()
        self._state.append(value)

        # Schrage's method on the signed 32-bit seed, C truncating division
        word = self._to_int32(value)
        for _ in range(1, self._DEGREE):
            hi = abs(word) // 127773
            if word < 0:
                hi = -hi
            lo = word - hi * 127773
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += self._MODULUS
            self._state.append(word)

        for i in range(self._SEPARATION):
            self._state.append(self._state[i])

        for _ in range(self._DISCARD):
            self._next_word()

    def _next_word(self) -> int:
        word = (self._state[-self._DEGREE] + self._state[-self._SEPARATION]) & 0xFFFFFFFF
        self._state.append(word)
        return word

    def rand(self) -> int:
        """Return the next value in ``[0, 2^31)``."""
        return self._next_word() >> 1

    def randbelow(self, n: int) -> int:
        """Return ``rand() % n``, the reduction the C program uses."""
        if n <= 0:
            raise ValueError(f"randbelow bound must be positive, got {n}")
        return self.rand() % n


class NumpyRandom:
    """numpy PCG64 backed generator. Deterministic per seed, not glibc compatible."""

    def __init__(self, seed: int = 1):
        self._rng: Optional[np.random.Generator] = None
        self.seed(seed)

    def seed(self, value: int) -> None:
        self._rng = np.random.default_rng(value)

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randbelow bound must be positive, got {n}")
        return int(self._rng.integers(0, n))


GENERATORS = {
    'glibc': GlibcRandom,
    'numpy': NumpyRandom,
}


def make_rng(name: str):
    """Create a generator by its configuration name."""
    try:
        factory = GENERATORS[name.lower()]
    except (KeyError, AttributeError):
        raise ConfigurationError(
            f"Unknown random generator: {name!r} "
            f"(expected one of {', '.join(sorted(GENERATORS))})"
        ) from None
    return factory()
