"""Determinant by cofactor expansion along the first row."""

import argparse
import sys


def _cofactor_expansion(a):
    if len(a) == 1:
        return a[0][0]
    if len(a) == 2:
        return a[0][0] * a[1][1] - a[0][1] * a[1][0]
    total = 0.0
    for j, element in enumerate(a[0]):
        minor = [row[:j] + row[j + 1:] for row in a[1:]]
        sign = -1.0 if j % 2 else 1.0
        total += element * sign * _cofactor_expansion(minor)
    return total


def determinant(a):
    """Return the determinant of a non-empty square matrix."""
    rows = [list(row) for row in a]
    n = len(rows)
    if n == 0:
        raise ValueError("matrix must not be empty")
    if any(len(row) != n for row in rows):
        raise ValueError("matrix must be square")
    return _cofactor_expansion(rows)


def _tokens(stream):
    for line in stream:
        yield from line.split()


def main(argv=None):
    """Read a square matrix from standard input and print its determinant."""
    argparse.ArgumentParser(description="Compute the determinant of a matrix.").parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter the size of a matrix: ", end="", flush=True)
        n = int(next(tokens))
        if n <= 0:
            print("Error. Incorrect matrix size.")
            return 1
        print("Enter matrix: ")
        a = [[float(next(tokens)) for _ in range(n)] for _ in range(n)]
    except (StopIteration, ValueError):
        print("Invalid input.", file=sys.stderr)
        return 1
    print(f"det(A) = {determinant(a):g}")
    return 0