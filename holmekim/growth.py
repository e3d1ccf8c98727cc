"""Holme-Kim growth: preferential attachment plus triangle formation.

P. Holme and B. J. Kim, Phys. Rev. E 65, 026107 (2002).

Start from a connected seed network, then add nodes one at a time. Each new
node links to m distinct targets: the first is chosen preferentially, each of
the other m-1 is, with probability pt, a neighbor of the last preferentially
chosen target (closing a triangle), otherwise another preferential pick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

import networkx as nx

from .config import GrowthConfig, settings
from .errors import ConfigurationError, GrowthStateError, InvariantViolation
from .profiling import timeit
from .rng import RandomSource
from .sampler import DegreeSampler
from .seed_net import generate_seed_network
from .targets import select_targets
from .validation import check_degree_sum, check_multiplicities, check_seed, check_target_set

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class GrowthState(str, Enum):
    SEEDED = "seeded"
    GROWING = "growing"
    COMPLETE = "complete"


@dataclass
class GrowthResult:
    graph: nx.Graph
    config: GrowthConfig
    seed_edges: int
    toss_count: int
    tf_toss_count: int
    tf_picks: int
    pa_fallbacks: int
    # seed edges sorted, then (new node, target) in pick order
    edges: list[tuple[int, int]] = field(default_factory=list)

    @property
    def tf_fraction(self) -> float:
        if self.toss_count == 0:
            return float("nan")
        return self.tf_toss_count / self.toss_count

    @property
    def expected_edges(self) -> int:
        return self.seed_edges + self.config.m * self.config.new_nodes


class HolmeKimGrowth:
    """Owns the graph and the degree sampler of one run."""

    def __init__(
        self,
        config: GrowthConfig,
        rng: Optional[RandomSource] = None,
        *,
        check_invariants: Optional[bool] = None,
        max_retries: Optional[int] = None,
    ) -> None:
        self.config = config
        self.rng = rng if rng is not None else RandomSource(config.randseed)
        self.check_invariants = bool(settings.CHECK_INVARIANTS if check_invariants is None else check_invariants)
        self.max_retries = int(settings.MAX_PICK_RETRIES if max_retries is None else max_retries)
        if self.max_retries < 1:
            raise ConfigurationError(f"max_retries must be >= 1, got {self.max_retries}")

        self.graph = generate_seed_network(
            config.seed_size, config.seed_type, self.rng, k_ave=config.k_ave
        )
        check_seed(self.graph, config.seed_size)
        self.seed_edges = self.graph.number_of_edges()
        self.edges: list[tuple[int, int]] = sorted(tuple(sorted(e)) for e in self.graph.edges())

        self.sampler = DegreeSampler()
        self.sampler.seed_from(self.graph, config.seed_size)
        check_degree_sum(self.graph, self.sampler)

        self.toss_count = 0
        self.tf_toss_count = 0
        self.tf_picks = 0
        self.pa_fallbacks = 0
        self.next_node = config.seed_size
        self.state = GrowthState.SEEDED

    @property
    def remaining(self) -> int:
        return self.config.net_size - self.next_node

    def step(self) -> tuple[int, ...]:
        """Add the next node with its m links; returns the chosen targets."""
        if self.remaining <= 0:
            raise GrowthStateError(f"network already has {self.config.net_size} nodes")
        self.state = GrowthState.GROWING
        i = self.next_node
        logger.debug("Adding new node %d to the network", i)

        sel = select_targets(
            i,
            self.config.m,
            self.config.pt,
            self.graph,
            self.sampler,
            self.rng,
            max_retries=self.max_retries,
            # no isolated nodes exist, so every node in the graph is a candidate
            candidates=self.graph.number_of_nodes(),
        )
        check_target_set(sel.targets, self.config.m, i)

        for t in sel.targets:
            self.graph.add_edge(i, t)
            self.sampler.record_edge(i, t)
            self.edges.append((i, t))

        self.toss_count += sel.tosses
        self.tf_toss_count += sel.tf_attempts
        self.tf_picks += sel.tf_picks
        self.pa_fallbacks += sel.pa_fallbacks
        self.next_node += 1

        if self.graph.number_of_nodes() != i + 1:
            raise InvariantViolation(f"after adding node {i} graph has {self.graph.number_of_nodes()} nodes")
        if self.check_invariants:
            check_degree_sum(self.graph, self.sampler)

        if self.remaining == 0:
            self._finish()
        return sel.targets

    def run(self, progress_cb: Optional[ProgressCallback] = None) -> GrowthResult:
        total = self.remaining
        logger.info("Growing the network... (%d new nodes)", total)
        every = max(1, int(settings.PROGRESS_EVERY))
        done = 0
        while self.remaining > 0:
            self.step()
            done += 1
            if progress_cb is not None:
                progress_cb(done, total)
            if done % every == 0:
                logger.info("added %d/%d nodes", done, total)
        if self.state is not GrowthState.COMPLETE:
            self._finish()
        return self.result()

    def _finish(self) -> None:
        cfg = self.config
        if self.graph.number_of_nodes() != cfg.net_size:
            raise InvariantViolation(f"network has {self.graph.number_of_nodes()} nodes, expected {cfg.net_size}")
        # the dice are thrown m-1 times for every added node
        if self.toss_count != cfg.expected_tosses:
            raise InvariantViolation(f"threw the dice {self.toss_count} times, expected {cfg.expected_tosses}")
        if self.check_invariants:
            check_degree_sum(self.graph, self.sampler)
            check_multiplicities(self.graph, self.sampler)
        self.state = GrowthState.COMPLETE

        logger.info("Generated Holme-Kim network of size N = %d", self.graph.number_of_nodes())
        if self.toss_count:
            logger.info(
                "Threw the dice %d times, %d below pt (fraction %.4f, pt=%g)",
                self.toss_count,
                self.tf_toss_count,
                self.tf_toss_count / self.toss_count,
                cfg.pt,
            )

    def result(self) -> GrowthResult:
        if self.state is not GrowthState.COMPLETE:
            raise GrowthStateError(f"growth is not complete (state={self.state.value})")
        return GrowthResult(
            graph=self.graph,
            config=self.config,
            seed_edges=self.seed_edges,
            toss_count=self.toss_count,
            tf_toss_count=self.tf_toss_count,
            tf_picks=self.tf_picks,
            pa_fallbacks=self.pa_fallbacks,
            edges=list(self.edges),
        )


@timeit("grow_holme_kim")
def grow_holme_kim(
    config: GrowthConfig,
    rng: Optional[RandomSource] = None,
    *,
    check_invariants: Optional[bool] = None,
    max_retries: Optional[int] = None,
    progress_cb: Optional[ProgressCallback] = None,
) -> GrowthResult:
    """Generate a Holme-Kim network for `config`."""
    logger.info("%s", config.describe())
    growth = HolmeKimGrowth(
        config, rng, check_invariants=check_invariants, max_retries=max_retries
    )
    return growth.run(progress_cb=progress_cb)
