"""Time-constrained cascades under the independent cascade model with delays."""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from tcimblock.graph import Graph
from tcimblock.sfmt import SFMT

UNREACHED = 10000
_FAR = 1000000.0


def utility(x: int | float) -> int | float:
    """Return the utility of ``x`` remaining time units: 0 if negative, else x + 1."""
    if x < 0:
        return 0
    return x + 1


@dataclass
class Cascade:
    """One sampled realisation of a cascade from the rumor nodes.

    ``arrival`` holds activation times (``UNREACHED`` for nodes never
    activated), ``pred`` the predecessors reaching each node at its earliest
    time, ``flag`` how many alternative earliest routes lead to each node,
    ``order`` every node in activation order and ``activated`` the non-rumor
    ones. ``sample_graph`` and ``edge_length`` are the live edges and their
    delays.
    """

    arrival: list[int]
    pred: list[list[int]]
    flag: list[int]
    visited: list[bool]
    order: list[int]
    activated: list[int]
    sample_graph: list[list[int]]
    edge_length: list[list[int]]


def simulate_cascade(
    graph: Graph,
    rng: SFMT,
    delays: Sequence[int],
    rumor_set: Iterable[int],
    is_rumor: Sequence[bool],
    deadline: int,
) -> Cascade:
    """Sample a cascade whose edges live with their probability and carry random delays.

    Raises ValueError when ``delays`` is empty.
    """
    if not delays:
        raise ValueError("at least one precomputed delay is needed")
    n = graph.n
    arrival = [UNREACHED] * n
    pred: list[list[int]] = [[] for _ in range(n + 1)]
    flag = [0] * n
    visited = [False] * n
    order: list[int] = []
    activated: list[int] = []
    sample_graph: list[list[int]] = [[] for _ in range(n)]
    edge_length: list[list[int]] = [[] for _ in range(n)]

    counter = itertools.count()
    heap: list[tuple[int, int, int]] = []
    for u in rumor_set:
        arrival[u] = 0
        heapq.heappush(heap, (0, next(counter), u))

    while heap:
        _, _, q = heapq.heappop(heap)
        if visited[q]:
            continue
        for u, p in zip(graph.out_neighbors[q], graph.out_probs[q]):
            delay = delays[rng.genrand_uint32() % len(delays)]
            if rng.genrand_real1() <= p and arrival[q] + delay <= deadline:
                sample_graph[q].append(u)
                edge_length[q].append(delay)
                reached = arrival[q] + delay
                if reached < arrival[u]:
                    arrival[u] = reached
                    pred[u] = [q]
                    heapq.heappush(heap, (reached, next(counter), u))
                elif reached == arrival[u]:
                    pred[u].append(q)
        visited[q] = True
        order.append(q)
        if not is_rumor[q]:
            activated.append(q)
        if pred[q]:
            flag[q] = flag[pred[q][0]] + len(pred[q]) - 1

    return Cascade(
        arrival=arrival,
        pred=pred,
        flag=flag,
        visited=visited,
        order=order,
        activated=activated,
        sample_graph=sample_graph,
        edge_length=edge_length,
    )


def earliest_activation(
    sample_graph: Sequence[Sequence[int]],
    edge_length: Sequence[Sequence[float]],
    sources: Iterable[int],
    blocked: int | None,
    target: int,
    n: int,
) -> float | None:
    """Return the earliest time ``target`` is reached from ``sources``.

    Edges into ``blocked`` are ignored. Returns None when ``target`` cannot
    be reached.
    """
    dist = [_FAR] * n
    heap: list[tuple[float, int]] = []
    for source in sources:
        dist[source] = 0.0
        heapq.heappush(heap, (0.0, source))

    while heap:
        d, current = heapq.heappop(heap)
        if current == target:
            return d
        if d > dist[current]:
            continue
        for nxt, length in zip(sample_graph[current], edge_length[current]):
            if nxt == blocked:
                continue
            candidate = dist[current] + length
            if candidate < dist[nxt]:
                dist[nxt] = candidate
                heapq.heappush(heap, (candidate, nxt))
    return None


def reverse_reachable(sample_graph: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return the nodes that reach ``source`` in ``sample_graph``, in breadth-first order."""
    reverse: list[list[int]] = [[] for _ in sample_graph]
    for u, successors in enumerate(sample_graph):
        for v in successors:
            reverse[v].append(u)

    seen = {source}
    found = [source]
    queue = deque([source])
    while queue:
        x = queue.popleft()
        for y in reverse[x]:
            if y not in seen:
                seen.add(y)
                found.append(y)
                queue.append(y)
    return found