# algokit

A small library of classic algorithms of the kind used in programming
contests. Everything is a plain Python function or class that takes its
input as arguments and returns its result. There are no third-party
dependencies.

## Modules

| Module | Contents |
| --- | --- |
| `algokit.bits` | `toggle_case`, `toggle_string` (ASCII case flip by bit mask), `to_binary_reversed`, `string_to_binary`, `byte_lines`, `subsets` |
| `algokit.numtheory` | `gcd`, `lcm`, `extended_gcd`, `ncr` (modulo 1 000 000 007), `power_mod`, the `Sieve` class, `odd_sieve_primes`, `odd_primes_up_to`, `primes_below`, `nth_primes`, `string_mod`, `long_division`, `split_words`, `is_vowel` |
| `algokit.strings` | `lps_table`, `kmp_search`, `undubstep`, `is_translation`, `k_string` |
| `algokit.traversal` | `Color`, `BfsResult`, `DfsResult`, `build_adjacency`, `bfs`, `bfs_path`, `dfs`, `reachable`, `bfs_order_matrix`, `bfs_distances`, `max_independent_set` (forests) |
| `algokit.unionfind` | `UnionFind` with union by size: `find`, `connected`, `union`, `count` |
| `algokit.shortest_paths` | `relax_bfs`, `dijkstra`, `shortest_path`, `floyd_warshall`, `prim_mst_weight` (undirected, non-negative weights) |
| `algokit.search` | `binary_search` (returns a `SearchResult` with `found` and `index`) and `n_queens` (boards 1 to 8) |
| `algokit.linkedlist` | `LinkedList` with `insert`, `count`, `delete`, iteration and `len` |
| `algokit.sorting` | `Person` ordered by age, `sort_people`, `sort_descending` |
| `algokit.problems` | `weird_sort`, `minesweeper_valid`, `next_prime`, `is_next_prime`, `answer_queries`, `read_ints`, `multiply_pairs`, `run_cases` |
| `algokit.stress` | `ApCase`, `Discrepancy`, random generators, brute/fast solution pairs and `stress_compare` |
| `algokit.debugfmt` | `format_value` and `debug_line` for brace-notation debug text |

Node numbering differs between functions and is stated in each docstring:
`build_adjacency`, `dijkstra` and `shortest_path` use nodes `1..n`;
`relax_bfs`, `floyd_warshall`, `prim_mst_weight` and `UnionFind` use `0..n-1`.
Unreachable nodes have a distance of `None`.

## Examples

Number theory:

```python
from algokit.numtheory import Sieve, gcd, ncr, power_mod

gcd(12, 18)              # 6
ncr(5, 2)                # 10
power_mod(2, 10, 1000)   # 24

sieve = Sieve(100)
sieve.is_prime(97)       # True
```

Strings:

```python
from algokit.strings import is_translation, k_string, kmp_search

kmp_search("abcabc", "abc")     # [0, 3]
is_translation("code", "edoc")  # True
k_string(2, "aazz")             # "azaz"
```

Graphs:

```python
from algokit.shortest_paths import dijkstra
from algokit.traversal import bfs, bfs_path, build_adjacency
from algokit.unionfind import UnionFind

adjacency = build_adjacency(4, [(1, 2), (2, 3), (3, 4)], False)
result = bfs(adjacency, 1)
bfs_path(result, 1, 4)          # [1, 2, 3, 4]

dijkstra(3, [(1, 2, 5), (2, 3, 1), (1, 3, 10)], 1)   # {1: 0, 2: 5, 3: 6}

sets = UnionFind(5)
sets.union(0, 1)                # True
sets.connected(0, 1)            # True
sets.count()                    # 4
```

Searching:

```python
from algokit.search import binary_search, n_queens

binary_search([1, 4, 5, 7, 10], 15)   # SearchResult(found=False, index=5)
n_queens(4)                           # [(2, 4, 1, 3), (3, 1, 4, 2)]
```

Debug text:

```python
from algokit.debugfmt import debug_line

debug_line("x, y", 1, [2, 3])   # '[x, y] = [1, {2, 3}]'
```

Stress testing a fast solution against a brute-force one:

```python
import random
from algokit.stress import random_watermelon, watermelon_brute, watermelon_fast

rng = random.Random(0)
for _ in range(1000):
    weight = random_watermelon(rng)
    assert watermelon_brute(weight) == watermelon_fast(weight)
```

## What it does not do

The package has no command-line programs: nothing reads standard input or
prints answers. To solve a judge problem, parse the input yourself (or use
`read_ints`, `multiply_pairs` or `run_cases` from `algokit.problems`) and call
the functions directly. The stress-testing helpers generate cases in-process;
they do not run other programs.

## Running the tests

The test suite uses pytest, listed in the `test` extra:

```
pip install .[test]
pytest
```