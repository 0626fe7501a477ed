"""Cholesky decomposition and the solution of symmetric linear systems."""

import argparse
import math
import sys


class NotPositiveDefiniteError(ValueError):
    """Raised when a matrix has no Cholesky factor."""


class NotSymmetricError(ValueError):
    """Raised when a matrix that must be symmetric is not."""


def _size(a):
    n = len(a)
    if n == 0:
        raise ValueError("matrix must not be empty")
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    return n


def cholesky_decompose(a):
    """Return the lower triangular L with L * L^T == a."""
    n = _size(a)
    lower = [[0.0] * n for _ in range(n)]
    for i in range(n):
        row = lower[i]
        pivot = a[i][i] - sum(v * v for v in row[:i])
        if not pivot >= 0:
            raise NotPositiveDefiniteError("The matrix is not positively determined.")
        row[i] = math.sqrt(pivot)
        if row[i] == 0 and i < n - 1:
            raise NotPositiveDefiniteError("The matrix is not positively determined.")
        for j in range(i + 1, n):
            partial = sum(p * q for p, q in zip(row[:i], lower[j][:i]))
            lower[j][i] = (a[j][i] - partial) / row[i]
    return lower


def transpose(a):
    """Return the transpose of a matrix."""
    return [list(column) for column in zip(*a)]


def solve_lower(l, rhs):
    """Solve l * y == rhs by forward substitution."""
    if len(l) != len(rhs):
        raise ValueError("matrix and right hand side differ in size")
    y = []
    for row, b in zip(l, rhs):
        i = len(y)
        y.append((b - sum(c * v for c, v in zip(row, y))) / row[i])
    return y


def solve_upper(u, y):
    """Solve u * x == y by back substitution."""
    n = len(u)
    if n != len(y):
        raise ValueError("matrix and right hand side differ in size")
    x = [0.0] * n
    for i in reversed(range(n)):
        partial = sum(c * v for c, v in zip(u[i][i + 1:], x[i + 1:]))
        x[i] = (y[i] - partial) / u[i][i]
    return x


def solve_slae(l, rhs):
    """Solve (l * l^T) * x == rhs given the Cholesky factor l."""
    return solve_upper(transpose(l), solve_lower(l, rhs))


def is_symmetric(a):
    """Tell whether a matrix equals its transpose."""
    return transpose(a) == [list(row) for row in a]


def _tokens(stream):
    for line in stream:
        yield from line.split()


def _print_matrix(a):
    print()
    for row in a:
        print(" ".join(f"{v:g}" for v in row) + " ")


def _print_vector(v):
    print()
    print(" ".join(f"{x:g}" for x in v) + " ")


def main(argv=None):
    """Read a symmetric system from standard input and solve it."""
    argparse.ArgumentParser(
        description="Solve a symmetric positive definite system by Cholesky decomposition."
    ).parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter matrix size: ", end="", flush=True)
        n = int(next(tokens))
        if n < 1:
            print("Incorrect size.", file=sys.stderr)
            return 1
        print(f"Enter matrix. You should enter {n} lines. Each line must have {n} elements.")
        a = [[float(next(tokens)) for _ in range(n)] for _ in range(n)]
        print(f"Enter right hand side vector. It must have {n} elements.")
        rhs = [float(next(tokens)) for _ in range(n)]

        print("\nYou entered: A = ", end="")
        _print_matrix(a)
        print("rhs = ", end="")
        _print_vector(rhs)

        if not is_symmetric(a):
            raise NotSymmetricError("The matrix is not symmetrical.")

        print("\nL = ", end="")
        lower = cholesky_decompose(a)
        _print_matrix(lower)

        solution = solve_slae(lower, rhs)
        print("\nSLAE solution = ", end="")
        _print_vector(solution)
    except (NotSymmetricError, NotPositiveDefiniteError) as exc:
        print(f"\n{exc}", file=sys.stderr)
        return 1
    except (StopIteration, ValueError):
        print("Invalid input.", file=sys.stderr)
        return 1
    return 0