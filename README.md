# algokit

Classic algorithms written as plain Python with no third-party dependencies.

## Installation

```
pip install algokit
```

To run the tests:

```
pip install "algokit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.searching` | `binary_search`, `common_prefix`, `longest_common_prefix`, `divide_longest_common_prefix` |
| `algokit.inversions` | `merge_count`, `count_inversions` (merge sort that counts inversions) |
| `algokit.text_analysis` | `analyze_string` (returns `CharacterCounts`), `tokenize`, `most_frequent_words`, `smallest_token`, `find_occurrences`, `format_occurrences` |
| `algokit.matching` | `compute_lps`, `kmp_search`, `bad_char_table`, `boyer_moore_search`, `rabin_karp_search`, `shift_table`, `horspool_search`, `horspool_first` |
| `algokit.graph_list` | `AdjacencyList`, `TraversalEdge`, `EdgeKind` |
| `algokit.graph_matrix` | `AdjacencyMatrix`, `MatrixEdge` |
| `algokit.flow` | `FlowNetwork` with `dinic`, `edmonds_karp` and `ford_fulkerson` |
| `algokit.textfile` | `read_and_concatenate` and the `algokit-concat` command |

## Examples

Searching and inversions:

```python
from algokit.searching import binary_search, longest_common_prefix
from algokit.inversions import count_inversions

binary_search([1, 3, 3, 3, 5, 7, 9, 9, 10], 7)        # 5
binary_search([1, 3, 5], 4)                           # -1
longest_common_prefix(["flower", "flow", "flight"])   # "fl"
count_inversions([4, 3, 2, 1])                        # ([1, 2, 3, 4], 6)
```

String matching. Every search returns a list of start indices; an empty
pattern raises `ValueError`. Horspool searches take an alphabet, and raise
`ValueError` when the pattern or a scanned text character is outside it:

```python
from algokit.matching import kmp_search, horspool_first

kmp_search("ABABDABACDABABCABAB", "ABABCABAB")        # [10]
horspool_first("love", "i love it", "abcdefghijklmnopqrstuvwxyz ")  # 2
```

Text utilities:

```python
from algokit.text_analysis import analyze_string, tokenize, find_occurrences, format_occurrences

analyze_string("I love CS3233")   # CharacterCounts(digits=4, vowels=3, consonants=4)
tokenize("I also love Algorithm.")  # ['i', 'also', 'love', 'algorithm']
format_occurrences(find_occurrences("aaa", "aa"))  # "{0, 1}"
```

Graphs. `AdjacencyList` holds undirected weighted edges between any hashable
vertices; its traversals yield `TraversalEdge` objects tagged with an
`EdgeKind` (`TREE`, `BACK` or `CROSS`). `AdjacencyMatrix` holds unweighted
undirected edges between integer vertices and yields `MatrixEdge` objects:

```python
from algokit.graph_list import AdjacencyList

graph = AdjacencyList()
graph.add_edge("A", "B", 1)
graph.add_edge("A", "C", 1)
graph.add_edge("B", "D", 1)
graph.add_edge("C", "D", 1)
print(graph.format())
for edge in graph.depth_first_edges("A"):
    print(edge.source, edge.target, edge.kind.value)
```

Maximum flow. Each method works on its own copy of the residual
capacities, so one network can be queried repeatedly:

```python
from algokit.flow import FlowNetwork

network = FlowNetwork(6)
for u, v, c in [(0, 1, 16), (0, 2, 13), (1, 2, 10), (1, 3, 12), (2, 1, 4),
                (2, 4, 14), (3, 2, 9), (3, 5, 20), (4, 3, 7), (4, 5, 4)]:
    network.add_edge(u, v, c)
network.edmonds_karp(0, 5)   # 23
network.dinic(0, 5)          # 23
```

## Command line

`algokit-concat` reads a UTF-8 text file and prints its lines joined by
single spaces, stopping at the first line that begins with `.......`.
If the file cannot be opened it prints an error and exits with status 1:

```
algokit-concat notes.txt
```

## What it does not do

`algokit-concat` is the only command; every other algorithm is used as a
library function. The functions return their results rather than printing
them.