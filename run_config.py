# run_config.py
from dataclasses import dataclass

# OpenFOAM labels are at most 64-bit signed
SEED_MIN = -(1 << 63)
SEED_MAX = (1 << 63) - 1
DEFAULT_SEED = 0


class ConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class Identity:
    """Keep the processor rank as is."""


@dataclass(frozen=True)
class Randomized:
    """Shuffle processor ranks with a permutation drawn from `seed`."""
    seed: int = DEFAULT_SEED

    def __post_init__(self):
        if isinstance(self.seed, bool) or not isinstance(self.seed, int):
            raise ConfigurationError(f"seed must be an integer, got {self.seed!r}")
        if not (SEED_MIN <= self.seed <= SEED_MAX):
            raise ConfigurationError(f"seed {self.seed} does not fit in a 64-bit label")


RunMode = Identity | Randomized


def mode_from_flags(random: bool, seed: int | None = None) -> RunMode:
    if seed is not None and not random:
        raise ConfigurationError("-seed requires -random to be specified")
    if not random:
        return Identity()
    return Randomized(DEFAULT_SEED if seed is None else seed)
