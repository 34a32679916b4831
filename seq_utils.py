# seq_utils.py
import numpy as np

# POSIX drand48 constants
_A = 0x5DEECE66D
_C = 0xB
_MASK = (1 << 48) - 1
_SEED_LOW = 0x330E


class Drand48:
    """48-bit linear congruential generator (srand48/drand48)."""

    def __init__(self, seed: int = 0):
        # srand48 keeps only the low 32 bits of the seed
        self.state = ((int(seed) & 0xFFFFFFFF) << 16) | _SEED_LOW

    def next_u48(self) -> int:
        self.state = (_A * self.state + _C) & _MASK
        return self.state

    def scalar01(self) -> float:
        return self.next_u48() / float(1 << 48)


def generate(seed: int, count: int) -> np.ndarray:
    """
    Returns `count` draws in [0, 1) from a fresh Drand48(seed).
    Same (seed, count) -> identical array; shorter counts are prefixes of longer ones.
    """
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise ValueError(f"count must be an integer, got {count!r}")
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    rng = Drand48(seed)
    draws = np.empty(int(count), dtype=np.float64)
    for i in range(draws.size):
        draws[i] = rng.scalar01()
    return draws
