from __future__ import annotations

import numpy as np


class RandomSource:
    """
    источник случайности для роста сети.
    одна обёртка над np.random.Generator, чтобы прогон был воспроизводим по seed
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = np.random.default_rng(seed)

    def next_int(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        return int(self._rng.integers(0, n))

    def next_float(self) -> float:
        """Uniform float in [0, 1)."""
        return float(self._rng.random())

    def spawn_seed(self) -> int:
        # seeds for external generators (networkx) drawn from our own stream
        return int(self._rng.integers(0, np.iinfo(np.int32).max))
