"""Directed influence graph read from a dataset folder."""

from __future__ import annotations

import struct
from os import PathLike
from pathlib import Path

_EDGE = struct.Struct("<IId")


class GraphFormatError(ValueError):
    """Raised when a dataset file does not have the expected layout."""


def read_attributes(path: str | PathLike[str]) -> tuple[int, int]:
    """Read ``n=<nodes>`` and ``m=<edges>`` tokens from an attribute file."""
    n: int | None = None
    m: int | None = None
    for token in Path(path).read_text().split():
        key, value = token[:2], token[2:]
        if key not in ("n=", "m="):
            raise GraphFormatError(f"unexpected token {token!r} in {path}")
        try:
            number = int(value)
        except ValueError:
            raise GraphFormatError(f"bad number in token {token!r}") from None
        if key == "n=":
            n = number
        else:
            m = number
    if n is None or m is None:
        raise GraphFormatError(f"{path} must define both n= and m=")
    return n, m


def read_edges(path: str | PathLike[str], n: int, m: int) -> list[tuple[int, int, float]]:
    """Read ``m`` binary edge records (source, target, probability).

    Each record is two little-endian unsigned 32-bit integers followed by
    a little-endian double.
    """
    data = Path(path).read_bytes()
    needed = m * _EDGE.size
    if len(data) < needed:
        raise GraphFormatError(
            f"{path} holds {len(data)} bytes, {m} edges need {needed}"
        )
    edges = list(_EDGE.iter_unpack(data[:needed]))
    for a, b, _ in edges:
        if a >= n or b >= n:
            raise GraphFormatError(f"edge ({a}, {b}) out of range for n={n}")
    return edges


class Graph:
    """Adjacency lists in both directions with per-edge probabilities."""

    def __init__(self, folder: str | PathLike[str], graph_file: str | PathLike[str]) -> None:
        self.folder = Path(folder)
        self.graph_file = Path(graph_file)
        self.n, self.m = read_attributes(self.folder / "attribute.txt")
        n = self.n
        self.out_degree = [0] * (n + 1)
        self.in_degree = [0] * (n + 1)
        self.out_neighbors: list[list[int]] = [[] for _ in range(n + 2)]
        self.in_neighbors: list[list[int]] = [[] for _ in range(n + 2)]
        self.out_probs: list[list[float]] = [[] for _ in range(n + 2)]
        self.in_probs: list[list[float]] = [[] for _ in range(n + 2)]

        for a, b, p in read_edges(self.graph_file, n, self.m):
            self.out_neighbors[a].append(b)
            self.out_probs[a].append(p)
            self.out_degree[a] += 1
            self.in_neighbors[b].append(a)
            self.in_probs[b].append(p)
            self.in_degree[b] += 1

        self.out_probs_initial = [list(ps) for ps in self.out_probs]
        self.in_probs_initial = [list(ps) for ps in self.in_probs]

        self.seed_set: list[int] = []
        self.ub_seed_set: list[int] = []
        self.lb_seed_set: list[int] = []
        self.rumor_set: list[int] = []
        self.is_rumor: list[bool] = [False] * (n + 1)


def sqr(t: float) -> float:
    """Return ``t`` squared."""
    return t * t