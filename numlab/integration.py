"""Composite Simpson and trapezoid quadrature on a uniform grid."""

import argparse
import itertools
import sys


def integrand(x):
    """The default integrand -2 - 7x + 4x^2."""
    return -2 - 7 * x + 4 * x**2


def uniform_grid(a, b, n):
    """Return n + 1 points from a towards b, built by adding a constant step."""
    if n < 1:
        raise ValueError("the number of intervals must be at least 1")
    step = (b - a) / n
    return list(itertools.accumulate([a] + [step] * n))


def simpson(a, b, n, func=integrand):
    """Integrate func over [a, b] with the composite Simpson rule on n intervals."""
    return sum(
        (right - left) / 6 * (func(left) + 4 * func((left + right) / 2) + func(right))
        for left, right in itertools.pairwise(uniform_grid(a, b, n))
    )


def trapezoid(a, b, n, func=integrand):
    """Integrate func over [a, b] with the composite trapezoid rule on n intervals."""
    return sum(
        (right - left) * (func(left) + func(right)) / 2
        for left, right in itertools.pairwise(uniform_grid(a, b, n))
    )


def _tokens(stream):
    for line in stream:
        yield from line.split()


def main(argv=None):
    """Read the interval count and bounds from standard input and integrate."""
    argparse.ArgumentParser(description="Integrate -2 - 7x + 4x^2 numerically.").parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter the amount of intervals: ", end="", flush=True)
        n = int(next(tokens))
        print("Enter the lower boundary of integration: ", end="", flush=True)
        a = float(next(tokens))
        print("Enter the upper boundary of integration: ", end="", flush=True)
        b = float(next(tokens))
    except (StopIteration, ValueError):
        print("Invalid input.", file=sys.stderr)
        return 1
    if n < 1:
        print("Incorrect amount of intervals.", file=sys.stderr)
        return 1
    print()
    print(f"Simpson method = {simpson(a, b, n):g}")
    print(f"Trapezioid method = {trapezoid(a, b, n):g}")
    return 0