"""Random numbers, delayed cascades, reverse-walk sampling and max cover for misinformation blocking."""

__version__ = "0.1.0"
__all__ = [
    "cascade",
    "coverage",
    "dominator",
    "graph",
    "memory",
    "sfmt",
    "sfmt_core",
    "sfmt_params",
    "trw",
]