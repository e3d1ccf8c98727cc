from __future__ import annotations

import logging

import networkx as nx

from .config import DEFAULT_K_AVE, MIN_SEED_SIZE, SeedType, parse_seed_type, settings
from .errors import SeedNetworkError
from .rng import RandomSource

logger = logging.getLogger(__name__)


def make_clique(n: int) -> nx.Graph:
    return nx.complete_graph(int(n))


def make_ring(n: int) -> nx.Graph:
    return nx.cycle_graph(int(n))


def make_chain(n: int) -> nx.Graph:
    return nx.path_graph(int(n))


def make_random_connected(
    n: int,
    k_ave: float,
    rng: RandomSource,
    max_attempts: int | None = None,
) -> nx.Graph:
    """
    Erdos-Renyi G(n,p) with p = k_ave/(n-1).
    несвязные сети выбрасываем и генерируем заново, пока не получится связная
    """
    n = int(n)
    p = min(1.0, float(k_ave) / float(max(1, n - 1)))
    attempts = int(settings.MAX_SEED_ATTEMPTS if max_attempts is None else max_attempts)
    for attempt in range(1, attempts + 1):
        H = nx.gnp_random_graph(n, p, seed=rng.spawn_seed())
        if H.number_of_edges() > 0 and nx.is_connected(H):
            logger.debug("connected random seed found after %d attempt(s)", attempt)
            return H
    raise SeedNetworkError(
        f"no connected random seed with n={n}, k_ave={k_ave} after {attempts} attempts"
    )


def generate_seed_network(
    seed_size: int,
    seed_type: SeedType | str,
    rng: RandomSource,
    k_ave: float = DEFAULT_K_AVE,
    max_attempts: int | None = None,
) -> nx.Graph:
    """Build the initial connected graph over nodes [0, seed_size)."""
    seed_type = parse_seed_type(seed_type)
    if int(seed_size) < MIN_SEED_SIZE:
        raise SeedNetworkError(f"seed network needs at least {MIN_SEED_SIZE} nodes, got {seed_size}")

    if seed_type is SeedType.CLIQUE:
        H = make_clique(seed_size)
    elif seed_type is SeedType.RING:
        H = make_ring(seed_size)
    elif seed_type is SeedType.CHAIN:
        H = make_chain(seed_size)
    else:
        H = make_random_connected(seed_size, k_ave, rng, max_attempts=max_attempts)

    # growth only ever appends, nodes are kept in 0..seed_size-1 order
    G = nx.Graph()
    G.add_nodes_from(range(int(seed_size)))
    G.add_edges_from(sorted(tuple(sorted(e)) for e in H.edges()))
    logger.info(
        "Seed network (%s): N=%d E=%d", seed_type.value, G.number_of_nodes(), G.number_of_edges()
    )
    return G
