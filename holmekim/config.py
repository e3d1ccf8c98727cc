"""
дефолтные настройки генератора + параметры одного прогона

"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# =========================
# Sampling
# =========================
MAX_PICK_RETRIES: int = 100_000     # redraws per target pick before giving up
MAX_SEED_ATTEMPTS: int = 10_000     # random seed regenerations until connected

# =========================
# Seed network
# =========================
DEFAULT_K_AVE: float = 2.0
MIN_SEED_SIZE: int = 2


class SeedType(str, Enum):
    RANDOM = "random"
    CLIQUE = "clique"
    RING = "ring"
    CHAIN = "chain"


@dataclass(frozen=True)
class Settings:
    # Расчёты
    DEFAULT_SEED: int = 42
    DEFAULT_SEED_TYPE: str = SeedType.RANDOM.value
    DEFAULT_K_AVE: float = DEFAULT_K_AVE

    MAX_PICK_RETRIES: int = MAX_PICK_RETRIES
    MAX_SEED_ATTEMPTS: int = MAX_SEED_ATTEMPTS

    # Проверки инвариантов между шагами (дорого на больших сетях)
    CHECK_INVARIANTS: bool = False

    # как часто писать прогресс в лог
    PROGRESS_EVERY: int = 10_000


settings = Settings()


def parse_seed_type(value: str | SeedType) -> SeedType:
    """Map a seed type name onto SeedType; unknown names fall back to random."""
    if isinstance(value, SeedType):
        return value
    name = str(value or "").strip().lower()
    try:
        return SeedType(name)
    except ValueError:
        logger.warning("Unknown seed type %r - using Erdos-Renyi network as seed", value)
        return SeedType.RANDOM


@dataclass(frozen=True)
class GrowthConfig:
    """Parameters of one Holme-Kim run.

    net_size: final number of nodes
    randseed: seed of the random source
    m: links added with every new node
    pt: probability of trying a triangle formation step
    seed_size / seed_type / k_ave: the initial network (k_ave only for random seeds)
    """

    net_size: int
    randseed: int
    m: int
    pt: float
    seed_size: int
    seed_type: SeedType = SeedType.RANDOM
    k_ave: float = DEFAULT_K_AVE

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed_type", parse_seed_type(self.seed_type))
        for name in ("net_size", "randseed", "m", "seed_size"):
            val = getattr(self, name)
            if isinstance(val, bool) or not isinstance(val, int):
                raise ConfigurationError(f"{name} must be an integer, got {val!r}")
        try:
            pt = float(self.pt)
            k_ave = float(self.k_ave)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"pt and k_ave must be numbers, got pt={self.pt!r}, k_ave={self.k_ave!r}") from e
        object.__setattr__(self, "pt", pt)
        object.__setattr__(self, "k_ave", k_ave)
        self.validate()

    def validate(self) -> None:
        if self.m < 1:
            raise ConfigurationError(f"m must be >= 1, got {self.m}")
        if not math.isfinite(self.pt) or not 0.0 <= self.pt <= 1.0:
            raise ConfigurationError(f"pt must be in [0, 1], got {self.pt}")
        if self.seed_size < MIN_SEED_SIZE:
            # an edgeless seed leaves nothing to attach to
            raise ConfigurationError(f"seed_size must be >= {MIN_SEED_SIZE}, got {self.seed_size}")
        if self.seed_size > self.net_size:
            raise ConfigurationError(
                "Seed size should not exceed network size. "
                f"Currently seed size={self.seed_size} and network size={self.net_size}."
            )
        if self.seed_type is SeedType.RANDOM and (not math.isfinite(self.k_ave) or self.k_ave <= 0):
            raise ConfigurationError(f"k_ave must be finite and >0, got {self.k_ave}")

    @property
    def new_nodes(self) -> int:
        return self.net_size - self.seed_size

    @property
    def expected_tosses(self) -> int:
        return (self.m - 1) * self.new_nodes

    def with_seed(self, randseed: int) -> "GrowthConfig":
        return replace(self, randseed=int(randseed))

    def describe(self) -> str:
        """Human readable parameter report."""
        lines = [
            "Parameters given for simulating Holme-Kim network:",
            f"Network size:\t\t\t\t\t{self.net_size}",
            f"m (number of links added per time step):\t{self.m}",
            f"p (probability of triangle formation step):\t{self.pt:g}",
            f"Seed size:\t\t\t\t\t{self.seed_size}",
        ]
        if self.seed_type is SeedType.RANDOM:
            lines.append(
                f"Seed type:\trandom seed (Erdos-Renyi) with average degree {self.k_ave:g}; "
                "disconnected seeds are discarded and regenerated"
            )
        elif self.seed_type is SeedType.CLIQUE:
            lines.append("Seed type:\tfully connected")
        else:
            lines.append(f"Seed type:\t{self.seed_type.value}")
        lines.append(f"Random number generator seed (integer): \t{self.randseed}")
        return "\n".join(lines)
