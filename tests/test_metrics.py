import io

import networkx as nx
import pandas as pd

from holmekim.config import GrowthConfig
from holmekim.graph_io import graph_to_edge_df, read_edge_list, write_edge_list
from holmekim.growth import HolmeKimGrowth, grow_holme_kim
from holmekim.metrics import (
    average_clustering,
    degree_entropy,
    degree_histogram,
    estimate_degree_exponent,
    graph_summary,
    summarize,
)


def test_degree_histogram_of_star():
    """Star: one hub of degree 4, four leaves."""
    h = degree_histogram(nx.star_graph(4))
    assert h.to_dict() == {1: 4, 4: 1}


def test_regular_graph_has_zero_degree_entropy_and_full_clustering():
    """Clique: single degree value, every triangle closed."""
    G = nx.complete_graph(6)
    assert degree_entropy(G) == 0.0
    assert average_clustering(G) == 1.0


def test_pure_pa_degree_exponent_near_minus_three():
    """PA growth gives a heavy tail with exponent around -3."""
    cfg = GrowthConfig(net_size=20_000, randseed=3, m=3, pt=0.0, seed_size=10, seed_type="clique")
    gamma = estimate_degree_exponent(grow_holme_kim(cfg).graph, k_min=3)
    assert -4.0 < gamma < -2.0


def test_summarize_reports_diagnostics():
    """Summary carries sizes and toss counters."""
    cfg = GrowthConfig(net_size=50, randseed=1, m=2, pt=0.5, seed_size=4, seed_type="clique")
    s = summarize(grow_holme_kim(cfg))
    assert s["nodes"] == 50
    assert s["edges"] == s["expected_edges"] == 6 + 2 * 46
    assert s["tosses"] == 46
    assert s["tf_attempts"] == s["tf_picks"] + s["pa_fallbacks"]
    assert s["pt"] == 0.5


def test_summarize_without_tosses():
    """m=1 never tosses, so there is no TF fraction."""
    cfg = GrowthConfig(net_size=20, randseed=1, m=1, pt=0.5, seed_size=3, seed_type="chain")
    s = summarize(grow_holme_kim(cfg))
    assert s["tosses"] == 0
    assert s["tf_fraction"] is None


def test_graph_summary_text():
    """Text block starts with node count."""
    txt = graph_summary(nx.complete_graph(4))
    assert txt.startswith("N=4 E=6\n")
    assert "Triangles=4" in txt
    assert "Clustering=1" in txt


def test_edge_list_keeps_commit_order(tmp_path):
    """Exported rows: sorted seed edges, then each new node with its targets in pick order."""
    cfg = GrowthConfig(net_size=8, randseed=1, m=2, pt=0.5, seed_size=4, seed_type="clique")
    growth = HolmeKimGrowth(cfg)
    committed = [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
    while growth.remaining > 0:
        i = growth.next_node
        committed.extend((i, t) for t in growth.step())
    res = growth.result()
    assert res.edges == committed

    df = graph_to_edge_df(res.graph, res.edges)
    assert list(df.itertuples(index=False, name=None)) == committed

    path = tmp_path / "edges.csv"
    write_edge_list(res.graph, path, edges=res.edges)
    assert list(pd.read_csv(path).itertuples(index=False, name=None)) == committed
    H = read_edge_list(path)
    assert nx.utils.edges_equal(res.graph.edges(), H.edges())


def test_stdout_edge_list_reads_back(capsys):
    """`-` writes the same headed CSV as a file, so read_edge_list accepts it."""
    cfg = GrowthConfig(net_size=20, randseed=3, m=2, pt=0.5, seed_size=4, seed_type="ring")
    res = grow_holme_kim(cfg)
    write_edge_list(res.graph, "-", edges=res.edges)
    out = capsys.readouterr().out
    assert out.startswith("src,dst\n")
    H = read_edge_list(io.StringIO(out))
    assert nx.utils.edges_equal(res.graph.edges(), H.edges())


def test_summarize_maps_undefined_statistics_to_none():
    """A seed-only clique has one degree value: no exponent fit, null instead of NaN."""
    cfg = GrowthConfig(net_size=4, randseed=1, m=2, pt=0.5, seed_size=4, seed_type="clique")
    s = summarize(grow_holme_kim(cfg))
    assert s["degree_exponent"] is None
    assert s["avg_clustering"] == 1.0
    assert all(not (isinstance(v, float) and v != v) for v in s.values())
