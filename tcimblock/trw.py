"""Sampling of time-constrained reverse walks (TRW sets and TRW paths)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from tcimblock.cascade import (
    Cascade,
    earliest_activation,
    reverse_reachable,
    simulate_cascade,
    utility,
)
from tcimblock.dominator import DominatorTree
from tcimblock.graph import Graph
from tcimblock.sfmt import SFMT


@dataclass
class TRWSample:
    """A TRW set (``lower``) and a TRW path (``upper``) rooted at ``source``.

    Both are lists of ``(node, weight)`` pairs ready to be added to a
    hypergraph.
    """

    source: int
    lower: list[tuple[int, float]]
    upper: list[tuple[int, float]]


def _critical_nodes(
    cascade: Cascade,
    source: int,
    rumors: Sequence[int],
    is_rumor: Sequence[bool],
    n: int,
) -> list[int]:
    """Nodes that every earliest route from the rumors to ``source`` passes through."""
    if cascade.flag[source] == 0:
        nodes = []
        node = source
        while not is_rumor[cascade.pred[node][0]]:
            node = cascade.pred[node][0]
            nodes.append(node)
        return nodes

    pred = [list(ps) for ps in cascade.pred]
    for rumor in rumors:
        pred[rumor].append(n)
    successors: list[list[int]] = [[] for _ in range(n + 1)]
    for u, ps in enumerate(pred):
        for v in ps:
            successors[v].append(u)
    tree = DominatorTree(n, successors)
    tree.build(n)
    extended = [bool(is_rumor[i]) for i in range(n)] + [True]
    return tree.critical_path(source, extended)


def build_trw_sample(
    cascade: Cascade,
    source: int,
    rumor_set: Iterable[int],
    is_rumor: Sequence[bool],
    n: int,
    deadline: int,
    path_reduction: bool,
) -> TRWSample:
    """Build the TRW set and TRW path of ``source`` within a sampled cascade.

    With ``path_reduction`` the TRW set holds only the source and the nodes
    on every earliest route to it; otherwise every node that reaches the
    source in the live-edge graph. Raises ValueError when ``source`` is a
    rumor node or was not activated.
    """
    if is_rumor[source] or not cascade.visited[source]:
        raise ValueError(f"node {source} is not an activated non-rumor node")
    rumors = list(rumor_set)
    full = utility(deadline - cascade.arrival[source])

    def weight_without(node: int) -> float:
        after = earliest_activation(
            cascade.sample_graph, cascade.edge_length, rumors, node, source, n
        )
        if after is None:
            return float(full)
        return float(full - utility(int(deadline - after)))

    if path_reduction:
        lower = [(source, float(full))]
        lower.extend(
            (node, weight_without(node))
            for node in _critical_nodes(cascade, source, rumors, is_rumor, n)
        )
    else:
        lower = [
            (node, weight_without(node))
            for node in reverse_reachable(cascade.sample_graph, source)
        ]

    upper: list[tuple[int, float]] = []
    node = source
    while not is_rumor[node]:
        upper.append((node, float(full)))
        if not cascade.pred[node]:
            raise ValueError(f"node {node} has no predecessor in the cascade")
        node = min(cascade.pred[node])

    return TRWSample(source=source, lower=lower, upper=upper)


def sample_trw(
    graph: Graph,
    rng: SFMT,
    delays: Sequence[int],
    rumor_set: Iterable[int],
    is_rumor: Sequence[bool],
    deadline: int,
    weighted: bool,
    path_reduction: bool,
) -> TRWSample:
    """Sample one cascade and one TRW sample from it.

    With ``weighted`` the source is drawn among the activated nodes of one
    cascade; otherwise a non-rumor node is drawn uniformly and cascades are
    sampled until it is activated. Raises ValueError when no source can be
    drawn.
    """
    rumors = list(rumor_set)
    n = graph.n
    if weighted:
        cascade = simulate_cascade(graph, rng, delays, rumors, is_rumor, deadline)
        if not cascade.activated:
            raise ValueError("no node outside the rumor set was activated")
        source = cascade.activated[rng.genrand_uint32() % len(cascade.activated)]
    else:
        if all(is_rumor[v] for v in range(n)):
            raise ValueError("every node belongs to the rumor set")
        while True:
            source = rng.genrand_uint32() % n
            while is_rumor[source]:
                source = rng.genrand_uint32() % n
            cascade = simulate_cascade(graph, rng, delays, rumors, is_rumor, deadline)
            if cascade.visited[source]:
                break
    return build_trw_sample(cascade, source, rumors, is_rumor, n, deadline, path_reduction)