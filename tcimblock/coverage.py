"""Weighted maximum coverage over collections of weighted hyperedges."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class Hypergraph:
    """Weighted hyperedges over the nodes ``0..n-1``.

    Each hyperedge is a list of ``(node, weight)`` pairs. For every node the
    hypergraph also keeps the hyperedges that contain it and the total
    weight it holds across them.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"node count must not be negative, got {n}")
        self.n = n
        self.hyperedges: list[list[tuple[int, float]]] = []
        self.node_hyperedges: list[list[tuple[int, float]]] = [[] for _ in range(n)]
        self.node_weight: list[float] = [0.0] * n

    def add(self, hyperedge: Iterable[tuple[int, float]]) -> int:
        """Append a hyperedge and return its index.

        Raises ValueError when a node lies outside ``0..n-1``.
        """
        members = [(int(node), float(weight)) for node, weight in hyperedge]
        for node, _ in members:
            if not 0 <= node < self.n:
                raise ValueError(f"node {node} out of range for n={self.n}")
        index = len(self.hyperedges)
        self.hyperedges.append(members)
        for node, weight in members:
            self.node_hyperedges[node].append((index, weight))
            self.node_weight[node] += weight
        return index

    def __len__(self) -> int:
        return len(self.hyperedges)


def get_max_index(node_weight: Sequence[int], k_max_mc: list[int]) -> int | None:
    """Return the node with the largest positive weight, or None if there is none.

    ``k_max_mc`` is kept sorted in place and collects the largest weights
    seen, for the improved upper bound.
    """
    best: int | None = None
    best_weight = 0
    for node, weight in enumerate(node_weight):
        if weight > best_weight:
            best, best_weight = node, weight
        if k_max_mc and weight > k_max_mc[0]:
            k_max_mc[0] = weight
            k_max_mc.sort()
    return best


def get_max_index_baseline(node_weight: Sequence[int]) -> int | None:
    """Return the first node with the largest positive weight, or None."""
    best: int | None = None
    best_weight = 0
    for node, weight in enumerate(node_weight):
        if weight > best_weight:
            best, best_weight = node, weight
    return best


def _initial_weights(hypergraph: Hypergraph) -> list[int]:
    return [int(weight) for weight in hypergraph.node_weight]


def _cover(
    hypergraph: Hypergraph, node: int, node_weight: list[int], removed: list[bool]
) -> None:
    """Lower the marginal weights of nodes sharing hyperedges with ``node``."""
    for index, weight in hypergraph.node_hyperedges[node]:
        if removed[index]:
            continue
        covered = int(weight)
        alive = False
        for member, member_weight in hypergraph.hyperedges[index]:
            if member_weight <= 0:
                continue
            diff = int(member_weight - covered)
            if diff <= 0:
                node_weight[member] = int(node_weight[member] - member_weight)
            else:
                node_weight[member] -= covered
                alive = True
        if not alive:
            removed[index] = True


def _check_k(k: int) -> None:
    if k < 0:
        raise ValueError(f"seed count must not be negative, got {k}")


def build_seed_set(hypergraph: Hypergraph, k: int) -> tuple[list[int], int]:
    """Greedily pick up to ``k`` nodes of maximum marginal coverage.

    Returns the chosen nodes and the improved upper bound on the optimal
    coverage of ``k`` nodes.
    """
    _check_k(k)
    node_weight = _initial_weights(hypergraph)
    removed = [False] * len(hypergraph)
    k_max_mc = [0] * k
    coverage = 0
    bound: int | None = None
    seeds: list[int] = []

    while len(seeds) < k:
        chosen = get_max_index(node_weight, k_max_mc)
        if chosen is None:
            break
        current = coverage + sum(k_max_mc)
        k_max_mc[:] = [0] * k
        bound = current if bound is None else min(bound, current)
        seeds.append(chosen)
        coverage += node_weight[chosen]
        _cover(hypergraph, chosen, node_weight, removed)

    get_max_index(node_weight, k_max_mc)
    final = coverage + sum(k_max_mc)
    bound = final if bound is None else min(bound, final)
    return seeds, bound


def build_seed_set_baseline(hypergraph: Hypergraph, k: int) -> tuple[list[int], int]:
    """Greedily pick up to ``k`` nodes; return them and the coverage they reach."""
    _check_k(k)
    node_weight = _initial_weights(hypergraph)
    removed = [False] * len(hypergraph)
    coverage = 0
    seeds: list[int] = []

    while len(seeds) < k:
        chosen = get_max_index_baseline(node_weight)
        if chosen is None:
            break
        seeds.append(chosen)
        coverage += node_weight[chosen]
        _cover(hypergraph, chosen, node_weight, removed)

    return seeds, coverage


def compute_coverage(hypergraph: Hypergraph, seed_set: Sequence[int]) -> int:
    """Return the weighted coverage that ``seed_set`` reaches, taken in order."""
    node_weight = _initial_weights(hypergraph)
    removed = [False] * len(hypergraph)
    coverage = 0
    for seed in seed_set:
        coverage += node_weight[seed]
        _cover(hypergraph, seed, node_weight, removed)
    return coverage