"""LU decomposition without pivoting (Doolittle form)."""

import argparse
import sys


def lu_decompose(a):
    """Return (L, U) with L unit lower triangular, U upper triangular and L * U == a.

    A zero pivot raises ZeroDivisionError.
    """
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    lower = [[0.0] * n for _ in range(n)]
    upper = [[0.0] * n for _ in range(n)]
    for i in range(n):
        lower[i][i] = 1.0
        for j in range(n):
            if i <= j:
                partial = sum(lower[i][k] * upper[k][j] for k in range(i))
                upper[i][j] = a[i][j] - partial
            else:
                partial = sum(lower[i][k] * upper[k][j] for k in range(j))
                lower[i][j] = (a[i][j] - partial) / upper[j][j]
    return lower, upper


def _tokens(stream):
    for line in stream:
        yield from line.split()


def _print_matrix(a):
    for row in a:
        print(" ".join(f"{v:g}" for v in row) + " ")


def main(argv=None):
    """Read a square matrix from standard input and print its LU factors."""
    argparse.ArgumentParser(description="Decompose a matrix into L and U factors.").parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter the size of a matrix: ", end="", flush=True)
        n = int(next(tokens))
        if n < 0:
            print("Incorrect size.", file=sys.stderr)
            return 1
        print(f"Enter A. You should enter {n} lines each containing {n} elements.")
        a = [[float(next(tokens)) for _ in range(n)] for _ in range(n)]
    except (StopIteration, ValueError):
        print("Invalid input.", file=sys.stderr)
        return 1
    try:
        lower, upper = lu_decompose(a)
    except ZeroDivisionError:
        print("Zero pivot encountered.", file=sys.stderr)
        return 1
    print("\nL =")
    _print_matrix(lower)
    print("\nU =")
    _print_matrix(upper)
    return 0