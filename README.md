# algonotebook

A library of classic algorithms. Each one is a small function or class that
takes plain Python values (lists, tuples, numbers) and returns plain Python
values. The package has no third-party dependencies and runs on Python 3.10
or later.

## Installation

```
pip install .
```

To install the test dependencies as well and run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algonotebook.numbertheory` | `mod`, `gcd`, `lcm`, `powermod`, `extended_euclid`, `modular_linear_equation_solver`, `mod_inverse`, `chinese_remainder_theorem`, `chinese_remainder`, `linear_diophantine` |
| `algonotebook.primes` | trial division `is_prime_slow`; Miller–Rabin `is_prime_fast` with `modular_multiplication`, `modular_exponentiation`, `witness` |
| `algonotebook.dates` | Gregorian dates and Julian day numbers: `date_to_int`, `int_to_date`, `int_to_day` |
| `algonotebook.latlong` | `LatLong` and `Rect` dataclasses, `to_latlong`, `to_rect` (degrees) |
| `algonotebook.fft` | iterative `dft`, linear `convolution`, recursive `fft`, `cyclic_convolution` |
| `algonotebook.fenwick` | `FenwickTree` with `add`, `prefix_sum`, `find` |
| `algonotebook.linalg` | `gauss_jordan` (determinant, inverse, solution), `rref` (rank and reduced form), `SingularMatrixError` |
| `algonotebook.kmp` | Knuth–Morris–Pratt: `build_pi`, `kmp_search` |
| `algonotebook.delaunay` | `delaunay_triangulation` |
| `algonotebook.convex_hull` | monotone chain `convex_hull` |
| `algonotebook.kdtree` | 2-D `KDTree` with `nearest` (squared distance) |
| `algonotebook.geometry` | `Point` plus projections, distances, line/segment/circle intersections, point-in-polygon, `signed_area`, `area`, `centroid`, `is_simple` |
| `algonotebook.shortest_paths` | `bellman_ford`, `dijkstra`, `shortest_path`, `floyd_warshall`, `NegativeCycleError` |
| `algonotebook.graph` | `LowestCommonAncestor`, `eulerian_path`, `strongly_connected_components` |
| `algonotebook.spanning_tree` | `kruskal`, `prim` |
| `algonotebook.flows` | `Dinic`, `MatrixMaxFlow`, `PushRelabel`, `MinCostMaxFlow`, Stoer–Wagner `min_cut` |
| `algonotebook.matching` | `bipartite_matching`, `min_cost_matching` |
| `algonotebook.graph_cut` | `graph_cut_inference` for binary pairwise optimisation |
| `algonotebook.csp` | `ForwardCheckingSolver` for constraint satisfaction |

## Examples

```python
from algonotebook.numbertheory import extended_euclid, chinese_remainder
from algonotebook.dates import date_to_int, int_to_date, int_to_day
from algonotebook.flows import MatrixMaxFlow
from algonotebook.fft import convolution
from algonotebook.kmp import kmp_search

extended_euclid(14, 30)                      # (2, -2, 1)
chinese_remainder([3, 5, 7], [2, 3, 2])     # (23, 105)

jd = date_to_int(3, 24, 2004)               # 2453089
int_to_date(jd)                             # (3, 24, 2004)
int_to_day(jd)                              # "Wed"

flow = MatrixMaxFlow(5)
for u, v, cap in [(0, 1, 3), (0, 2, 4), (0, 3, 5), (0, 4, 5),
                  (1, 2, 2), (2, 3, 4), (2, 4, 1), (3, 4, 10)]:
    flow.add_edge(u, v, cap)
flow.max_flow(0, 4)                         # 15

convolution([1, 3, 4, 5, 7], [2, 4, 6])     # about [2, 10, 26, 44, 58, 58, 42]
kmp_search("AABAACAADAABAABA", "AABA")      # [0, 9, 12]
```

## Notes on behaviour

- Error cases raise exceptions instead of returning status codes:
  `gauss_jordan` raises `SingularMatrixError` on a singular matrix,
  `bellman_ford` raises `NegativeCycleError` when a negative-weight cycle is
  reachable, and `mod_inverse`, `chinese_remainder_theorem`,
  `chinese_remainder` and `linear_diophantine` raise `ValueError` when there
  is no solution.
- In `numbertheory`, integer division and remainder truncate toward zero
  (except `mod`, which uses Python's `%`).
- `is_prime_fast` needs `n >= 3` and accepts an optional `random.Random`
  instance for reproducible runs.
- `PushRelabel.max_flow` is meant to be called once per instance.
- `shortest_paths` and `spanning_tree` mark missing edges differently:
  `math.inf` (or `None` for `bellman_ford`) in the former, `-1` in the latter.

## What the package does not do

It is a library only: there are no command-line tools and nothing reads
problem input from files or standard input. It has no routines for longest
common subsequence, longest increasing subsequence, or fast exponentiation of
numbers and matrices.