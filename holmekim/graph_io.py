from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Optional, Tuple

import networkx as nx
import numpy as np
import pandas as pd

"""
рёбра -> табличка (src, dst) и запись на диск.
порядок строк = порядок добавления рёбер (GrowthResult.edges), чтобы прогоны можно было сравнивать построчно.
stdout и файлы пишутся в одном формате: с заголовком, через запятую (для .tsv/.txt/.edg - через таб)
"""


def _as_int(x):
    return int(x) if isinstance(x, (int, np.integer)) else x


def edges_to_df(edges: Iterable[Tuple[int, int]]) -> pd.DataFrame:
    rows = [{"src": _as_int(u), "dst": _as_int(v)} for u, v in edges]
    return pd.DataFrame(rows, columns=["src", "dst"])


def graph_to_edge_df(G: nx.Graph, edges: Optional[Iterable[Tuple[int, int]]] = None) -> pd.DataFrame:
    """Edge table; `edges` fixes the row order, otherwise the graph's own edge order."""
    return edges_to_df(G.edges() if edges is None else edges)


def _default_sep(path: str | Path) -> str:
    return "\t" if Path(str(path)).suffix.lower() in (".tsv", ".txt", ".edg") else ","


def write_edge_list(
    G: nx.Graph,
    path: str | Path,
    sep: str | None = None,
    edges: Optional[Iterable[Tuple[int, int]]] = None,
) -> None:
    """Write the edge list with a src,dst header; `-` writes the same CSV to stdout."""
    df = graph_to_edge_df(G, edges)
    if str(path) == "-":
        df.to_csv(sys.stdout, sep=sep or ",", index=False)
        return
    path = Path(path)
    df.to_csv(path, sep=sep or _default_sep(path), index=False)


def read_edge_list(path, sep: str | None = None) -> nx.Graph:
    """Read back what write_edge_list wrote; `path` may also be an open text stream."""
    if sep is None:
        sep = "," if hasattr(path, "read") else _default_sep(path)
    df = pd.read_csv(path, sep=sep)
    if "src" not in df.columns or "dst" not in df.columns:
        raise ValueError(f"Нет обязательных колонок: {['src', 'dst']}")
    return nx.from_pandas_edgelist(df, source="src", target="dst", create_using=nx.Graph())
