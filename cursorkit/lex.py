"""Sort the lines of a text file into lexicographic (byte-wise) order."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

_PROG = "lex"


def _byte_key(line: str) -> bytes:
    # Byte-wise ordering, matching how raw file bytes compare.
    return line.encode("utf-8", "surrogateescape")


def sort_lines(lines: Iterable[str]) -> list[str]:
    """Return the given lines in byte-wise lexicographic order."""
    return sorted(lines, key=_byte_key)


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Read the input file, sort its lines and write them to the output file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(f"Usage: {_PROG} <input file> <output file>", file=sys.stderr)
        return 1
    in_path, out_path = args

    try:
        with open(in_path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
            text = fh.read()
    except OSError:
        print(f"Unable to open file {in_path} for reading")
        return 1

    try:
        with open(
            out_path, "w", encoding="utf-8", errors="surrogateescape", newline=""
        ) as fh:
            fh.write("\n".join(sort_lines(_split_lines(text))))
    except OSError:
        print(f"Unable to open file {out_path} for writing")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())