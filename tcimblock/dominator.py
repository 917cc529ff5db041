"""Dominator trees of rooted directed graphs (Lengauer-Tarjan)."""

from __future__ import annotations

from collections.abc import Sequence


class DominatorTree:
    """Immediate dominators of the nodes ``0..n`` of a directed graph.

    ``graph`` gives the successors of each node and has ``n + 1`` entries.
    """

    def __init__(self, n: int, graph: Sequence[Sequence[int]]) -> None:
        if len(graph) != n + 1:
            raise ValueError(f"graph must have {n + 1} adjacency lists, got {len(graph)}")
        self.n = n
        self.graph = [list(succ) for succ in graph]
        size = n + 2
        self.parent = [0] * size
        self.order = [0] * size
        self.node_at = [0] * size
        self._ancestor = [-1] * size
        self._best = list(range(size))
        self.semi = list(range(size))
        self.idom = [0] * size
        self.children: list[list[int]] = [[] for _ in range(size)]
        self._preds: list[list[int]] = [[] for _ in range(size)]
        for u, succ in enumerate(self.graph):
            for v in succ:
                self._preds[v].append(u)
        self._clock = 0
        self._built = False

    def _dfs(self, root: int) -> None:
        self._clock += 1
        self.order[root] = self._clock
        self.node_at[self._clock] = root
        stack = [(root, iter(self.graph[root]))]
        while stack:
            u, successors = stack[-1]
            for v in successors:
                if not self.order[v]:
                    self.parent[v] = u
                    self._clock += 1
                    self.order[v] = self._clock
                    self.node_at[self._clock] = v
                    stack.append((v, iter(self.graph[v])))
                    break
            else:
                stack.pop()

    def _eval(self, x: int) -> int:
        path = []
        while self._ancestor[x] != -1:
            path.append(x)
            x = self._ancestor[x]
        root = x
        order, semi, best = self.order, self.semi, self._best
        for node in reversed(path):
            f = self._ancestor[node]
            if order[semi[best[node]]] > order[semi[best[f]]]:
                best[node] = best[f]
            self._ancestor[node] = root
        return root

    def build(self, root: int) -> list[int]:
        """Compute immediate dominators from ``root`` and return them.

        Unreachable nodes and the root keep the value 0.
        """
        if self._built:
            raise RuntimeError("dominator tree already built")
        self._built = True
        self._dfs(root)
        clock = self._clock
        order, semi, best, idom = self.order, self.semi, self._best, self.idom
        for i in range(clock, 1, -1):
            x = self.node_at[i]
            lowest = clock + 1
            for u in self._preds[x]:
                if not order[u]:
                    continue
                self._eval(u)
                lowest = min(lowest, order[semi[best[u]]])
            self._ancestor[x] = self.parent[x]
            semi[x] = self.node_at[lowest]
            self.children[semi[x]].append(x)
            x = self.node_at[i - 1]
            for u in self.children[x]:
                self._eval(u)
                idom[u] = best[u] if semi[best[u]] != x else x
            self.children[x].clear()
        for i in range(2, clock + 1):
            u = self.node_at[i]
            if idom[u] != semi[u]:
                idom[u] = idom[idom[u]]
            self.children[idom[u]].append(u)
        return idom[: self.n + 1]

    def critical_path(self, source: int, is_rumor: Sequence[bool]) -> list[int]:
        """Return the dominators of ``source`` up to the first rumor node, nearest first."""
        if not self._built:
            raise RuntimeError("build() must be called first")
        path = []
        current = source
        while not is_rumor[self.idom[current]]:
            current = self.idom[current]
            path.append(current)
        return path