"""Degree-proportional sampling over an append-only multiset of node ids.

Every node appears once per edge endpoint, so a uniform pick over the entries
is a pick proportional to degree.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List, Tuple

import networkx as nx

from .errors import EmptySamplerError
from .rng import RandomSource

logger = logging.getLogger(__name__)


class DegreeSampler:
    def __init__(self) -> None:
        self._entries: List[int] = []
        self._seeded = False

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> Tuple[int, ...]:
        return tuple(self._entries)

    def count(self, node: int) -> int:
        return self._entries.count(node)

    def degree_counts(self) -> Dict[int, int]:
        return dict(Counter(self._entries))

    def seed_from(self, G: nx.Graph, seed_size: int) -> None:
        """Add degree(k) copies of every seed node k in [0, seed_size)."""
        if self._seeded or self._entries:
            raise RuntimeError("sampler is already initialized")
        for k in range(int(seed_size)):
            self._entries.extend([k] * G.degree(k))
        self._seeded = True
        logger.debug("sampler seeded with %d entries: %s", len(self._entries), self._entries)

    def record_edge(self, u: int, v: int) -> None:
        self._entries.append(u)
        self._entries.append(v)

    def sample(self, rng: RandomSource) -> int:
        if not self._entries:
            raise EmptySamplerError("cannot sample from an empty degree sampler (edgeless network)")
        return self._entries[rng.next_int(len(self._entries))]
