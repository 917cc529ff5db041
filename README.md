# tcimblock

Building blocks for choosing nodes to block so that misinformation spreading
through a social graph reaches fewer people before a deadline. Spread follows
an independent-cascade model in which every live edge carries a random
diffusion delay. A node activated at time `t` under deadline `T` has utility
`T - t + 1`, or 0 when `t > T + 1`.

The package provides:

- a pure-Python SIMD-oriented Fast Mersenne Twister (SFMT) random number
  generator;
- a reader for binary graph datasets;
- cascade sampling with delays, and earliest-activation search;
- sampling of time-critical reverse walks: a TRW set, which is the lower-bound
  hyperedge, and a TRW path, which is the upper-bound hyperedge;
- dominator trees, which give the critical nodes on every earliest route;
- greedy weighted maximum coverage with an improved upper bound;
- helpers that report process memory use.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `tcimblock.sfmt`, `tcimblock.sfmt_core`, `tcimblock.sfmt_params`

`SFMT(seed, mexp=19937)` is seeded by a 32-bit integer (`init_gen_rand`) or by
a sequence of 32-bit integers (`init_by_array`). The supported Mersenne
exponents are 607, 1279, 2281, 4253, 11213, 19937, 44497, 86243, 132049 and
216091. `get_params` raises `ValueError` for any other exponent.

The generator offers:

- `genrand_uint32` and `genrand_uint64`;
- block generation with `fill_array32` and `fill_array64`;
- floats from `genrand_real1` on [0, 1], `genrand_real2` on [0, 1),
  `genrand_real3` on (0, 1), and `genrand_res53` and `genrand_res53_mix`,
  both on [0, 1) with 53-bit resolution;
- `idstring`, `min_array_size32` and `min_array_size64`.

`tcimblock.sfmt_core` exposes the underlying state functions: `init_gen_rand`,
`init_by_array`, `gen_rand_all`, `gen_rand_array`, `do_recursion`,
`lshift128`, `rshift128`, `period_certification` and `block_count`.

```python
from tcimblock.sfmt import SFMT

rng = SFMT(1234)
values = [rng.genrand_uint32() for _ in range(5)]
```

### `tcimblock.graph`

`Graph(folder, graph_file)` reads `folder/attribute.txt` and the edge file. It
raises `GraphFormatError` when either file is malformed.

- `attribute.txt` holds whitespace-separated tokens `n=<nodes>` and
  `m=<edges>`.
- The edge file holds `m` binary records. Each record is a source node and a
  target node, both little-endian unsigned 32-bit integers, followed by the
  propagation probability as a little-endian 64-bit float.

The graph has out- and in-neighbour lists with their probabilities. It also
has `rumor_set`, an empty list, and `is_rumor`, a list of `n + 1` booleans
that are all `False`. Fill both before you sample.

### `tcimblock.cascade`

- `simulate_cascade(graph, rng, delays, rumor_set, is_rumor, deadline)`
  samples one cascade and returns a `Cascade`. Each edge delay is drawn
  uniformly from the list of integers `delays`.
- `earliest_activation` runs a Dijkstra search over the live edges with one
  node blocked.
- `reverse_reachable` lists the nodes that reach a given node.
- `utility` is the time utility described above.

### `tcimblock.trw`

`sample_trw(graph, rng, delays, rumor_set, is_rumor, deadline, weighted, path_reduction)`
returns a `TRWSample`. It holds a `lower` hyperedge (the TRW set) and an
`upper` hyperedge (the TRW path). Both are lists of `(node, weight)` pairs.

- `weighted=True` draws the source among the nodes that one cascade
  activated.
- `weighted=False` draws a non-rumor node uniformly and resamples cascades
  until that node is activated.
- `path_reduction=True` keeps only the source and the critical nodes on its
  earliest routes. These come from `DominatorTree`.

`build_trw_sample` builds the sample from a cascade you already have.

### `tcimblock.dominator`

`DominatorTree(n, graph).build(root)` returns the immediate dominators of the
nodes. `critical_path(source, is_rumor)` returns the dominators of `source`,
nearest first, up to the first rumor node.

### `tcimblock.coverage`

`Hypergraph(n)` collects weighted hyperedges with `add`. On it:

- `build_seed_set(hypergraph, k)` picks up to `k` nodes greedily and returns
  them with the improved upper bound on the optimal coverage.
- `build_seed_set_baseline` returns the chosen nodes and the coverage they
  reach.
- `compute_coverage(hypergraph, seed_set)` evaluates a given seed set.

```python
from tcimblock.coverage import Hypergraph, build_seed_set, compute_coverage

h = Hypergraph(3)
h.add([(0, 2.0), (1, 1.0)])
h.add([(1, 3.0), (2, 3.0)])
seeds, bound = build_seed_set(h, 1)
covered = compute_coverage(h, seeds)
```

### `tcimblock.memory`

- `peak_memory_mb()` returns the peak resident set size in megabytes.
- `process_mem_usage()` reads `/proc/self/stat` and returns the virtual and
  resident sizes in kilobytes, or `(0.0, 0.0)` when the file cannot be read.
- `disp_mem_usage()` prints both figures in megabytes and returns the
  physical one.

## What the package does not do

There is no command-line program and no end-to-end blocking run. The package
does not:

- read rumor-set files;
- precompute a delay distribution; you pass the delays yourself;
- estimate spread by Monte Carlo simulation or by a stopping rule;
- run the sandwich loop that alternates between the two bounds;
- run a greedy Monte Carlo baseline;
- write result files.

To build a complete blocking pipeline, combine the cascade, TRW and coverage
functions in your own code.