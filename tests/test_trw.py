import struct

import pytest

from tcimblock.cascade import simulate_cascade, utility
from tcimblock.graph import Graph
from tcimblock.sfmt import SFMT
from tcimblock.trw import TRWSample, build_trw_sample, sample_trw

DEADLINE = 10


def make_graph(tmp_path, n, edges, rumors):
    (tmp_path / "attribute.txt").write_text(f"n={n} m={len(edges)}")
    graph_file = tmp_path / "graph_ic.inf"
    graph_file.write_bytes(b"".join(struct.pack("<IId", a, b, p) for a, b, p in edges))
    graph = Graph(tmp_path, graph_file)
    graph.rumor_set = list(rumors)
    for r in rumors:
        graph.is_rumor[r] = True
    graph.is_rumor[n] = True
    return graph


def line(tmp_path):
    return make_graph(tmp_path, 4, [(0, 1, 1.0), (1, 2, 1.0), (2, 3, 1.0)], [0])


def diamond(tmp_path, tail=False):
    edges = [(0, 1, 1.0), (0, 2, 1.0), (1, 3, 1.0), (2, 3, 1.0)]
    if tail:
        edges.append((3, 4, 1.0))
    return make_graph(tmp_path, 5 if tail else 4, edges, [0])


def cascade_of(graph):
    return simulate_cascade(graph, SFMT(7), [1], graph.rumor_set, graph.is_rumor, DEADLINE)


def test_line_with_path_reduction(tmp_path):
    graph = line(tmp_path)
    cascade = cascade_of(graph)
    sample = build_trw_sample(cascade, 3, graph.rumor_set, graph.is_rumor, graph.n, DEADLINE, True)
    full = utility(DEADLINE - cascade.arrival[3])
    assert [node for node, _ in sample.lower] == [3, 2, 1]
    assert all(weight == full for _, weight in sample.lower)
    assert sample.upper == [(3, full), (2, full), (1, full)]
    assert sample.source == 3


def test_diamond_uses_dominators(tmp_path):
    graph = diamond(tmp_path)
    cascade = cascade_of(graph)
    sample = build_trw_sample(cascade, 3, graph.rumor_set, graph.is_rumor, graph.n, DEADLINE, True)
    full = utility(DEADLINE - cascade.arrival[3])
    assert sample.lower == [(3, full)]
    assert sample.upper == [(3, full), (1, full)]


def test_diamond_tail_critical_node(tmp_path):
    graph = diamond(tmp_path, tail=True)
    cascade = cascade_of(graph)
    sample = build_trw_sample(cascade, 4, graph.rumor_set, graph.is_rumor, graph.n, DEADLINE, True)
    full = utility(DEADLINE - cascade.arrival[4])
    assert sample.lower == [(4, full), (3, full)]
    assert [node for node, _ in sample.upper] == [4, 3, 1]


def test_diamond_without_path_reduction(tmp_path):
    graph = diamond(tmp_path)
    cascade = cascade_of(graph)
    sample = build_trw_sample(cascade, 3, graph.rumor_set, graph.is_rumor, graph.n, DEADLINE, False)
    weights = dict(sample.lower)
    assert set(weights) == {0, 1, 2, 3}
    assert weights[3] == utility(DEADLINE - cascade.arrival[3])
    assert weights[0] == weights[1] == weights[2] == 0.0


def test_build_rejects_rumor_source(tmp_path):
    graph = line(tmp_path)
    cascade = cascade_of(graph)
    with pytest.raises(ValueError):
        build_trw_sample(cascade, 0, graph.rumor_set, graph.is_rumor, graph.n, DEADLINE, True)


@pytest.mark.parametrize("weighted", [True, False])
@pytest.mark.parametrize("path_reduction", [True, False])
def test_sample_trw_invariants(tmp_path, weighted, path_reduction):
    graph = line(tmp_path)
    rng = SFMT(1234)
    for _ in range(10):
        sample = sample_trw(graph, rng, [1, 2], graph.rumor_set, graph.is_rumor,
                            DEADLINE, weighted, path_reduction)
        assert isinstance(sample, TRWSample)
        assert sample.source in {1, 2, 3}
        assert sample.upper[0][0] == sample.source
        assert [node for node, _ in sample.upper] == list(range(sample.source, 0, -1))
        assert sample.source in dict(sample.lower)


def test_weighted_without_activated_nodes_fails(tmp_path):
    graph = make_graph(tmp_path, 3, [], [0])
    with pytest.raises(ValueError):
        sample_trw(graph, SFMT(1), [1], graph.rumor_set, graph.is_rumor, DEADLINE, True, True)


def test_uniform_with_all_rumors_fails(tmp_path):
    graph = make_graph(tmp_path, 2, [(0, 1, 1.0)], [0, 1])
    with pytest.raises(ValueError):
        sample_trw(graph, SFMT(1), [1], graph.rumor_set, graph.is_rumor, DEADLINE, False, True)