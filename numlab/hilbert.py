"""Hilbert matrix generation."""

import argparse
import sys


def hilbert_matrix(rows, columns):
    """Return the rows x columns Hilbert matrix with entries 1 / (i + j + 1)."""
    if rows < 0 or columns < 0:
        raise ValueError("matrix dimensions must not be negative")
    return [[1.0 / (i + j + 1) for j in range(columns)] for i in range(rows)]


def _tokens(stream):
    for line in stream:
        yield from line.split()


def main(argv=None):
    """Read dimensions from standard input and print the Hilbert matrix."""
    argparse.ArgumentParser(description="Print a Hilbert matrix.").parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter the amount of rows in a matrix: ", end="", flush=True)
        rows = int(next(tokens))
        print("Enter the amount of columns in a matrix: ", end="", flush=True)
        columns = int(next(tokens))
        matrix = hilbert_matrix(rows, columns)
    except (StopIteration, ValueError):
        print("Invalid input.", file=sys.stderr)
        return 1
    print()
    for row in matrix:
        print(" ".join(f"{v:g}" for v in row) + " ")
    return 0