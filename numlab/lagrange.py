"""Evaluation of the Lagrange interpolation polynomial."""

import argparse
import sys


def lagrange_value(xs, fs, point):
    """Evaluate the polynomial through (xs[i], fs[i]) at point."""
    xs = list(xs)
    fs = list(fs)
    if len(xs) != len(fs):
        raise ValueError("xs and fs must have the same length")
    total = 0.0
    for i, (xi, fi) in enumerate(zip(xs, fs)):
        basis = 1.0
        for j, xj in enumerate(xs):
            if j != i:
                basis *= (point - xj) / (xi - xj)
        total += fi * basis
    return total


def _tokens(stream):
    for line in stream:
        yield from line.split()


def main(argv=None):
    """Read interpolation nodes from standard input and evaluate the polynomial."""
    argparse.ArgumentParser(description="Evaluate a Lagrange polynomial.").parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter an amount of points: ", end="", flush=True)
        n = int(next(tokens))
        if n < 2:
            print("Incorrect size.", file=sys.stderr)
            return 1
        print(f"Enter x values, there must be {n} of them:")
        xs = [float(next(tokens)) for _ in range(n)]
        print(f"Enter f(x) values, there must be {n} of them:")
        fs = [float(next(tokens)) for _ in range(n)]
        print("Enter a point to find the value of the polynomial in: ", end="", flush=True)
        point = float(next(tokens))
        result = lagrange_value(xs, fs, point)
    except (StopIteration, ValueError, ZeroDivisionError):
        print("Invalid input.", file=sys.stderr)
        return 1
    print(f"Result = {result:g}")
    return 0