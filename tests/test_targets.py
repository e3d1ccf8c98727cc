import networkx as nx
import pytest

from holmekim.errors import SamplingStallError
from holmekim.sampler import DegreeSampler
from holmekim.targets import select_targets


class ScriptedRandom:
    """Replays fixed draws so the selector path is fully determined."""

    def __init__(self, ints, floats=()):
        self.ints = list(ints)
        self.floats = list(floats)

    def next_int(self, n):
        v = self.ints.pop(0)
        assert 0 <= v < n
        return v

    def next_float(self):
        return self.floats.pop(0)


def _triangle_with_tail():
    # 0-1-2 triangle plus 2-3; sampler entries: [0, 0, 1, 1, 2, 2, 2, 3]
    G = nx.Graph()
    G.add_edges_from([(0, 1), (1, 2), (2, 0), (2, 3)])
    s = DegreeSampler()
    s.seed_from(G, 4)
    return G, s


def test_single_link_is_one_preferential_pick():
    """m=1 takes one PA pick and never tosses."""
    G, s = _triangle_with_tail()
    sel = select_targets(4, 1, 0.5, G, s, ScriptedRandom([4]))
    assert sel.targets == (2,)
    assert sel.tosses == 0


def test_preferential_pick_redraws_duplicates():
    """An already picked node is rejected and redrawn."""
    G, s = _triangle_with_tail()
    rng = ScriptedRandom([7, 7, 0], [0.5])
    sel = select_targets(4, 2, 0.0, G, s, rng)
    assert sel.targets == (3, 0)
    assert (sel.tosses, sel.tf_attempts) == (1, 0)
    assert rng.ints == []


def test_triangle_step_picks_neighbor_of_last_pa_node():
    """With toss < pt the second target is a neighbor of the first."""
    G, s = _triangle_with_tail()
    sel = select_targets(4, 2, 1.0, G, s, ScriptedRandom([7, 0], [0.2]))
    assert sel.targets == (3, 2)
    assert (sel.tf_attempts, sel.tf_picks, sel.pa_fallbacks) == (1, 1, 0)


def test_triangle_step_falls_back_to_preferential():
    """No unpicked neighbor left: the TF attempt becomes a PA pick."""
    G, s = _triangle_with_tail()
    rng = ScriptedRandom([7, 0, 4, 0], [0.1, 0.1])
    sel = select_targets(4, 3, 1.0, G, s, rng)
    assert sel.targets == (3, 2, 0)
    assert (sel.tosses, sel.tf_attempts, sel.tf_picks, sel.pa_fallbacks) == (2, 2, 1, 1)


def test_fallback_pick_becomes_last_pa_node():
    """After a fallback, TF looks at the neighbors of the new PA node."""
    G, s = _triangle_with_tail()
    rng = ScriptedRandom([7, 0, 4, 0, 0], [0.1, 0.1, 0.1])
    sel = select_targets(4, 4, 1.0, G, s, rng)
    # node 0 neighbors are [1, 2]; 2 is taken so 1 is the only option
    assert sel.targets == (3, 2, 0, 1)
    assert sel.tf_picks == 2


def test_toss_at_pt_is_preferential():
    """toss == pt is not below pt, so a PA step is made."""
    G, s = _triangle_with_tail()
    sel = select_targets(4, 2, 0.5, G, s, ScriptedRandom([7, 0], [0.5]))
    assert sel.targets == (3, 0)
    assert sel.tf_attempts == 0


def test_bounded_retries_raise_stall():
    """Exhausting the retry budget raises instead of looping forever."""
    G = nx.path_graph(2)
    s = DegreeSampler()
    s.seed_from(G, 2)
    rng = ScriptedRandom([0, 0, 0, 0], [0.9])
    with pytest.raises(SamplingStallError):
        select_targets(2, 2, 0.0, G, s, rng, max_retries=3)


def test_too_few_candidates_fail_fast():
    """m above the number of linked nodes is rejected before drawing."""
    G, s = _triangle_with_tail()
    rng = ScriptedRandom([])
    with pytest.raises(SamplingStallError):
        select_targets(4, 5, 0.5, G, s, rng, candidates=4)
