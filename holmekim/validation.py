"""Consistency checks between the graph and the degree sampler.

All checks raise InvariantViolation. They are cheap enough for tests and small
runs; the growth loop only calls the per-step ones when invariant checking is
switched on.
"""

from __future__ import annotations

from typing import Sequence

import networkx as nx

from .errors import InvariantViolation
from .sampler import DegreeSampler


def degree_sum(G: nx.Graph) -> int:
    return int(sum(d for _, d in G.degree()))


def check_degree_sum(G: nx.Graph, sampler: DegreeSampler) -> None:
    total = degree_sum(G)
    if total != len(sampler):
        raise InvariantViolation(f"degree sum {total} != sampler entries {len(sampler)}")
    if len(sampler) != 2 * G.number_of_edges():
        raise InvariantViolation(
            f"sampler entries {len(sampler)} != 2 * edges ({G.number_of_edges()})"
        )


def check_multiplicities(G: nx.Graph, sampler: DegreeSampler) -> None:
    counts = sampler.degree_counts()
    for u, d in G.degree():
        if counts.get(u, 0) != d:
            raise InvariantViolation(f"node {u}: degree {d} but {counts.get(u, 0)} sampler entries")
    extra = set(counts) - set(G.nodes())
    if extra:
        raise InvariantViolation(f"sampler holds unknown nodes: {sorted(extra)}")


def check_target_set(targets: Sequence[int], m: int, new_node: int) -> None:
    if len(targets) != m:
        raise InvariantViolation(f"node {new_node}: picked {len(targets)} targets, expected {m}")
    if len(set(targets)) != len(targets):
        raise InvariantViolation(f"node {new_node}: duplicate targets {list(targets)}")
    if new_node in targets:
        raise InvariantViolation(f"node {new_node}: self loop in targets")


def check_seed(G: nx.Graph, seed_size: int) -> None:
    if G.number_of_nodes() != seed_size:
        raise InvariantViolation(f"seed has {G.number_of_nodes()} nodes, expected {seed_size}")
    if G.number_of_edges() == 0:
        raise InvariantViolation("seed network has no edges")
    isolated = list(nx.isolates(G))
    if isolated:
        raise InvariantViolation(f"seed network has isolated nodes: {isolated}")
    if not nx.is_connected(G):
        raise InvariantViolation("seed network is not connected")
