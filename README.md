# cursorkit

The package has three small data structures and three command-line tools that use them.

## Data structures

- `cursorkit.cursorlist.CursorList` is a sequence with one cursor. You move the cursor with `move_front`, `move_back`, `move_prev` and `move_next`. Stepping past either end makes the cursor undefined, and `index()` then returns -1. You read and change the element under the cursor with `get`, `set`, `insert_before`, `insert_after` and `delete`. `front`, `back`, `prepend`, `append`, `delete_front`, `delete_back`, `clear`, `copy` and `concat` work on the whole list. If you call an operation whose precondition does not hold, it raises `ListError`.
- `cursorkit.bfsgraph.Graph` is a graph on the vertices `1..order` with sorted adjacency lists. You add edges with `add_edge` for undirected edges or `add_arc` for directed ones. After `bfs(s)`, the methods `distance`, `parent` and `path` report shortest-path data. An unreachable vertex has distance `INF` (-1), and its `path` is `[NIL]` (`NIL` is -2). If a vertex number is not valid, the call raises `GraphError`.
- `cursorkit.digraph.Digraph` is a directed graph. `add_arc` does not add an arc that is already there. `dfs(order)` visits roots in the given order and returns the vertices by decreasing finish time. After that, `parent`, `discover` and `finish` report the results of the search. `transpose` and `copy` return new graphs. Failed preconditions raise `DigraphError`.
- `cursorkit.findcomponents.strongly_connected_components(graph)` returns the strongly connected components of a `Digraph` as lists of vertices, in topological order.

```python
from cursorkit.cursorlist import CursorList

lst = CursorList([3, 1, 2])
lst.move_back()
lst.insert_before(7)
print(lst)          # 3 1 7 2
print(lst.index())  # 3
```

```python
from cursorkit.bfsgraph import Graph

g = Graph(4)
g.add_edge(1, 2)
g.add_edge(2, 3)
g.bfs(1)
print(g.distance(3))  # 2
print(g.path(3))      # [1, 2, 3]
print(g.path(4))      # [-2]
```

## Commands

Each command reads an input file and writes an output file:

```
cursorkit-lex INPUT OUTPUT              # sort the lines of INPUT lexicographically (byte-wise)
cursorkit-findpath INPUT OUTPUT         # adjacency list, then shortest paths for each query pair
cursorkit-findcomponents INPUT OUTPUT   # strongly connected components of a digraph
```

You can also call the same work directly:

- `cursorkit.lex.sort_lines(lines)`
- `cursorkit.findpath.find_paths(text)`
- `cursorkit.findcomponents.find_components(text)`

The last two take the whole input text and return the report as a string.

### Input format for `cursorkit-findpath` and `cursorkit-findcomponents`

- The first line gives the number of vertices.
- Each following line holds a pair `u v`.
- A pair `0 0` ends the edge list.
- For `cursorkit-findpath`, a second block of `source destination` pairs follows, and it also ends with `0 0`. For each pair, the report gives the distance and one shortest path, or says that no path exists.

## What the package does not do

The package has no sparse matrix type and no command for matrix arithmetic. It covers only the cursor list, the two graph types and the three commands above.

## Tests

```
pip install -e .[test]
pytest
```