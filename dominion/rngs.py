"""Multi-stream Lehmer random number generator.

The generator has 256 independent streams. Each stream holds one state
value, and every draw advances that state with the multiplier 48271
modulo 2**31 - 1.
"""

from __future__ import annotations

import math
import sys
import time
from collections.abc import Sequence

MODULUS = 2147483647
MULTIPLIER = 48271
CHECK = 399268537
STREAMS = 256
A256 = 22925
DEFAULT = 123456789


class RandomStreams:
    """A set of 256 Lehmer generator streams, one of which is current."""

    def __init__(self) -> None:
        self._seeds = [DEFAULT] + [0] * (STREAMS - 1)
        self._stream = 0
        self._initialized = False

    @property
    def stream(self) -> int:
        """Index of the current stream."""
        return self._stream

    def random(self) -> float:
        """Advance the current stream and return a float in (0, 1)."""
        value = (MULTIPLIER * self._seeds[self._stream]) % MODULUS
        self._seeds[self._stream] = value
        return value / MODULUS

    def plant_seeds(self, x: int) -> None:
        """Seed stream 0 with ``x`` and derive every other stream from it.

        Consecutive streams are 8,367,782 draws apart.
        """
        self._initialized = True
        current = self._stream
        self.select_stream(0)
        self.put_seed(x)
        self._stream = current
        for j in range(1, STREAMS):
            self._seeds[j] = (A256 * self._seeds[j - 1]) % MODULUS

    def put_seed(self, x: int) -> None:
        """Set the state of the current stream.

        A positive ``x`` is the state (reduced modulo the modulus), a
        negative ``x`` takes the state from the clock, and zero asks for
        a seed on standard input.
        """
        if x > 0:
            x %= MODULUS
        if x < 0:
            x = int(time.time()) % MODULUS
        while not 0 < x < MODULUS:
            reply = input("\nEnter a positive integer seed (9 digits or less) >> ")
            try:
                x = int(reply.strip())
            except ValueError:
                x = 0
            if not 0 < x < MODULUS:
                print("\nInput out of range ... try again")
        self._seeds[self._stream] = x

    def get_seed(self) -> int:
        """Return the state of the current stream."""
        return self._seeds[self._stream]

    def select_stream(self, index: int) -> None:
        """Make stream ``index`` (taken modulo 256) the current one."""
        self._stream = index % STREAMS
        if not self._initialized and self._stream != 0:
            self.plant_seeds(DEFAULT)

    def self_test(self) -> bool:
        """Check the generator against its known reference values."""
        self.select_stream(0)
        self.put_seed(1)
        for _ in range(10000):
            self.random()
        ok = self.get_seed() == CHECK
        self.select_stream(1)
        self.plant_seeds(1)
        return ok and self.get_seed() == A256


def find_target(seed: int, target: int, max_draws: int | None = None) -> int | None:
    """Draw integers below 10**9 from stream 1 until one equals ``target``.

    Returns the number of draws it took, or None if ``max_draws`` draws
    passed without a match.
    """
    rng = RandomStreams()
    rng.select_stream(1)
    rng.put_seed(seed)
    draws = 0
    while max_draws is None or draws < max_draws:
        draws += 1
        if math.floor(rng.random() * 1000000000) == target:
            return draws
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Search a seeded stream for a target value and report when found."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("Not enough inputs:  seed target")
        return 1
    try:
        seed, target = int(args[0]), int(args[1])
    except ValueError:
        print("Not enough inputs:  seed target")
        return 1
    if find_target(seed, target) is not None:
        print("Found the bug!")
    return 0


if __name__ == "__main__":
    sys.exit(main())