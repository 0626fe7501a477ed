"""Random symmetric positive semi-definite matrices built as L * L^T."""

import argparse
import random
import sys


def random_lower_triangular(n, rng=None):
    """Return an n x n lower triangular matrix of random digits 0..9."""
    if n < 0:
        raise ValueError("matrix size must not be negative")
    rng = rng if rng is not None else random.Random()
    return [[float(rng.randrange(10)) if j <= i else 0.0 for j in range(n)] for i in range(n)]


def transpose(a):
    """Return the transpose of a matrix."""
    return [list(column) for column in zip(*a)]


def multiply(a, b):
    """Return the matrix product a * b."""
    if a and len(a[0]) != len(b):
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def _tokens(stream):
    for line in stream:
        yield from line.split()


def _print_matrix(a):
    for row in a:
        print(" ".join(f"{v:g}" for v in row) + " ")


def main(argv=None):
    """Read a size from standard input and print a random L and A = L * L^T."""
    argparse.ArgumentParser(description="Generate a random matrix of the form L * L^T.").parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter the size of a matrix: ", end="", flush=True)
        n = int(next(tokens))
        lower = random_lower_triangular(n)
    except (StopIteration, ValueError):
        print("Invalid input.", file=sys.stderr)
        return 1
    product = multiply(lower, transpose(lower))
    print("\nL = ")
    _print_matrix(lower)
    print("\nA = ")
    _print_matrix(product)
    return 0