"""
выбор m целей для нового узла: первая цель всегда PA,
остальные m-1 - с вероятностью pt шаг TF (сосед последнего PA-узла), иначе PA.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

import networkx as nx

from .config import settings
from .errors import ConfigurationError, SamplingStallError
from .rng import RandomSource
from .sampler import DegreeSampler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TargetSelection:
    targets: Tuple[int, ...]
    tosses: int
    tf_attempts: int
    tf_picks: int
    pa_fallbacks: int


def _pick_preferential(
    sampler: DegreeSampler,
    rng: RandomSource,
    picked: Set[int],
    max_retries: int,
    new_node: int,
) -> int:
    # rejection sampling keeps the pick degree-proportional over unpicked nodes
    for _ in range(max_retries):
        node = sampler.sample(rng)
        if node not in picked:
            return node
    raise SamplingStallError(
        f"node {new_node}: no unpicked node found after {max_retries} draws "
        f"({len(picked)} already picked)"
    )


def select_targets(
    new_node: int,
    m: int,
    pt: float,
    G: nx.Graph,
    sampler: DegreeSampler,
    rng: RandomSource,
    *,
    max_retries: Optional[int] = None,
    candidates: Optional[int] = None,
) -> TargetSelection:
    """Pick the m distinct targets of new_node.

    candidates: number of nodes with non-zero degree, if the caller knows it;
    used to fail fast when m can never be satisfied.
    """
    retries = int(settings.MAX_PICK_RETRIES if max_retries is None else max_retries)
    if retries < 1:
        raise ConfigurationError(f"max_retries must be >= 1, got {retries}")
    if candidates is not None and m > candidates:
        raise SamplingStallError(
            f"node {new_node}: cannot pick {m} distinct targets among {candidates} linked nodes"
        )

    targets: List[int] = []
    picked: Set[int] = set()
    tosses = tf_attempts = tf_picks = pa_fallbacks = 0

    pa_node = _pick_preferential(sampler, rng, picked, retries, new_node)
    targets.append(pa_node)
    picked.add(pa_node)
    logger.debug("node %d: initial PA target %d", new_node, pa_node)

    for _ in range(m - 1):
        toss = rng.next_float()
        tosses += 1

        if toss < pt:
            tf_attempts += 1
            available = [k for k in G[pa_node] if k not in picked]
            if available:
                tf_node = available[rng.next_int(len(available))]
                targets.append(tf_node)
                picked.add(tf_node)
                tf_picks += 1
                logger.debug("node %d: TF target %d (via %d)", new_node, tf_node, pa_node)
                continue
            pa_fallbacks += 1
            pa_node = _pick_preferential(sampler, rng, picked, retries, new_node)
            logger.debug("node %d: PA target %d since TF step was unsuccessful", new_node, pa_node)
        else:
            pa_node = _pick_preferential(sampler, rng, picked, retries, new_node)
            logger.debug("node %d: PA target %d", new_node, pa_node)

        targets.append(pa_node)
        picked.add(pa_node)

    return TargetSelection(
        targets=tuple(targets),
        tosses=tosses,
        tf_attempts=tf_attempts,
        tf_picks=tf_picks,
        pa_fallbacks=pa_fallbacks,
    )
