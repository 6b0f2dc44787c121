"""Read a graph and vertex pairs, and report distances and shortest paths."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

from cursorkit.bfsgraph import INF, Graph, GraphError

_PROG = "findpath"


def _pairs(line: str) -> Iterator[tuple[int, int]]:
    numbers = [int(token) for token in line.split()]
    if len(numbers) % 2:
        numbers.append(0)
    return zip(numbers[::2], numbers[1::2])


def find_paths(text: str) -> str:
    """Build the graph described in text, answer its queries and return the report.

    The first line gives the number of vertices. Edge lines of "u v" pairs
    follow, ended by the pair "0 0"; then query lines of "source destination"
    pairs, also ended by "0 0".
    """
    if not text:
        raise ValueError("Empty file is unable to be read")
    rows = iter(text.split("\n"))
    header = next(rows).split()
    graph = Graph(int(header[0]) if header else 0)

    for line in rows:
        finished = False
        for u, v in _pairs(line):
            if u == 0 and v == 0:
                finished = True
            else:
                graph.add_edge(u, v)
        if finished:
            break

    out = [str(graph), "\n"]
    for line in rows:
        finished = False
        for source, dest in _pairs(line):
            if source == 0 and dest == 0:
                finished = True
                break
            graph.bfs(source)
            dist = graph.distance(dest)
            if dist == INF:
                out.append(f"The distance from {source} to {dest} is infinity\n")
                out.append(f"No {source}-{dest} path exists\n\n")
            else:
                path = " ".join(str(v) for v in graph.path(dest))
                out.append(f"The distance from {source} to {dest} is {dist}\n")
                out.append(f"A shortest {source}-{dest} path is: {path}\n\n")
        if finished:
            break
    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the path finder from an input file to an output file."""
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
                report = find_paths(text)
            except ValueError as exc:
                print(exc)
                return 1
            except GraphError as exc:
                print(f"Graph Error: {exc}", file=sys.stderr)
                return 1
            fh.write(report)
    except OSError:
        print(f"Unable to open file {out_path} for writing")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())