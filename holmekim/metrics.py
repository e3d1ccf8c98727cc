from __future__ import annotations

import math
from typing import Any, Dict

import networkx as nx
import numpy as np
import pandas as pd
from scipy.stats import entropy as scipy_entropy
from scipy.stats import linregress

from .growth import GrowthResult


def average_clustering(G: nx.Graph) -> float:
    if G.number_of_nodes() == 0:
        return float("nan")
    return float(nx.average_clustering(G))


def degree_histogram(G: nx.Graph) -> pd.Series:
    """Number of nodes per degree, indexed by degree."""
    degrees = pd.Series([d for _, d in G.degree()], dtype="int64")
    return degrees.value_counts().sort_index().rename("count")


def degree_entropy(G: nx.Graph) -> float:
    degrees = np.fromiter((d for _, d in G.degree()), dtype=float)
    if degrees.size == 0:
        return float("nan")
    _, counts = np.unique(degrees, return_counts=True)
    return abs(float(scipy_entropy(counts)))


def estimate_degree_exponent(G: nx.Graph, k_min: int | None = None) -> float:
    """
    Exponent gamma of P(k) ~ k^gamma (negative for heavy tails).

    Least squares on log-log CCDF: P(K>=k) ~ k^(gamma+1), so gamma = slope - 1.
    Грубая оценка, для HK-сетей ожидаем около -3.
    """
    hist = degree_histogram(G)
    if k_min is not None:
        hist = hist[hist.index >= int(k_min)]
    if len(hist) < 3:
        return float("nan")
    k = hist.index.to_numpy(dtype=float)
    ccdf = hist.to_numpy(dtype=float)[::-1].cumsum()[::-1] / float(hist.sum())
    fit = linregress(np.log(k), np.log(ccdf))
    return float(fit.slope) - 1.0


def _finite_or_none(x: float) -> float | None:
    # NaN is not valid JSON; undefined statistics go out as null
    x = float(x)
    return None if math.isnan(x) else x


def summarize(result: GrowthResult) -> Dict[str, Any]:
    G = result.graph
    cfg = result.config
    N = G.number_of_nodes()
    E = G.number_of_edges()
    return {
        "nodes": int(N),
        "edges": int(E),
        "seed_edges": int(result.seed_edges),
        "expected_edges": int(result.expected_edges),
        "avg_degree": _finite_or_none(2.0 * E / N) if N else None,
        "avg_clustering": _finite_or_none(average_clustering(G)),
        "degree_exponent": _finite_or_none(estimate_degree_exponent(G, k_min=cfg.m)),
        "degree_entropy": _finite_or_none(degree_entropy(G)),
        "tosses": int(result.toss_count),
        "tf_attempts": int(result.tf_toss_count),
        "tf_picks": int(result.tf_picks),
        "pa_fallbacks": int(result.pa_fallbacks),
        "tf_fraction": _finite_or_none(result.tf_fraction),
        "pt": float(cfg.pt),
    }


def graph_summary(G: nx.Graph) -> str:
    """Short text report of a grown network, logged at the end of a CLI run."""
    N = G.number_of_nodes()
    E = G.number_of_edges()
    degs = [d for _, d in G.degree()]
    comps = nx.number_connected_components(G) if N > 0 else 0
    return (
        f"N={N} E={E}\n"
        f"<k>={(2.0 * E / N if N else 0.0):.4g} k_min={min(degs, default=0)} k_max={max(degs, default=0)}\n"
        f"Components={comps} Triangles={sum(nx.triangles(G).values()) // 3}\n"
        f"Clustering={average_clustering(G):.6g}\n"
    )
