"""Read a directed graph and report its strongly connected components."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

from cursorkit.digraph import NIL, Digraph, DigraphError

_PROG = "findcomponents"


def strongly_connected_components(graph: Digraph) -> list[list[int]]:
    """Return the strongly connected components of graph in topological order."""
    stack = graph.dfs(range(1, graph.order() + 1))
    transposed = graph.transpose()
    stack = transposed.dfs(stack)

    components: list[list[int]] = []
    current: list[int] = []
    for v in reversed(stack):
        current.append(v)
        if transposed.parent(v) == NIL:
            components.append(current[::-1])
            current = []
    return components


def _pairs(line: str) -> Iterator[tuple[int, int]]:
    numbers = [int(token) for token in line.split()]
    if len(numbers) % 2:
        numbers.append(0)
    return zip(numbers[::2], numbers[1::2])


def find_components(text: str) -> str:
    """Build the graph described in text and return its component report.

    The first line gives the number of vertices; arc lines of "u v" pairs
    follow, ended by the pair "0 0".
    """
    if not text:
        raise ValueError("Empty file is unable to be read")
    rows = iter(text.split("\n"))
    header = next(rows).split()
    graph = Digraph(int(header[0]) if header else 0)

    for line in rows:
        finished = False
        for u, v in _pairs(line):
            if u == 0 and v == 0:
                finished = True
                break
            graph.add_arc(u, v)
        if finished:
            break

    components = strongly_connected_components(graph)
    out = [
        "Adjacency list representation of G:\n",
        str(graph),
        "\n",
        f"G contains {len(components)} strongly connected components:\n",
    ]
    for number, component in enumerate(components, start=1):
        out.append(f"Component {number}: " + " ".join(map(str, component)) + "\n")
    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the component finder from an input file to an output file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(f"Usage: {_PROG} <input file> <output file>", file=sys.stderr)
        return 1
    in_path, out_path = args

    try:
        with open(in_path, encoding="utf-8") as fh:
            text = fh.read()
    except OSError:
        print(f"Unable to open file {in_path} for reading")
        return 1

    try:
        with open(out_path, "w", encoding="utf-8") as fh:
            try:
                report = find_components(text)
            except ValueError as exc:
                print(exc)
                return 1
            except DigraphError as exc:
                print(f"Graph Error: {exc}", file=sys.stderr)
                return 1
            fh.write(report)
    except OSError:
        print(f"Unable to open file {out_path} for writing")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())