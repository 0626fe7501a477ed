"""Moments of a discrete random variable."""

import argparse
import math
import sys


def _pairs(xs, ps):
    xs = list(xs)
    ps = list(ps)
    if len(xs) != len(ps):
        raise ValueError("values and probabilities must have the same length")
    return zip(xs, ps)


def expectation(xs, ps):
    """Return the expected value sum(x * p)."""
    return sum(x * p for x, p in _pairs(xs, ps))


def variance(xs, ps):
    """Return sum(x^2 * p) - E(x)^2."""
    xs = list(xs)
    ps = list(ps)
    second = sum(x * x * p for x, p in _pairs(xs, ps))
    return second - expectation(xs, ps) ** 2


def standard_deviation(xs, ps):
    """Return the square root of the variance, or NaN if it is negative."""
    d = variance(xs, ps)
    return math.sqrt(d) if d >= 0 else math.nan


def _tokens(stream):
    for line in stream:
        yield from line.split()


def main(argv=None):
    """Read a distribution from standard input and print its moments."""
    argparse.ArgumentParser(description="Compute E(x), D(x) and sigma(x).").parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter the amount of values: ", end="", flush=True)
        n = int(next(tokens))
        if n < 0:
            print("Incorrect size.", file=sys.stderr)
            return 1
        print("Enter x values:")
        xs = [float(next(tokens)) for _ in range(n)]
        print("Enter P(x) values:")
        ps = [float(next(tokens)) for _ in range(n)]
    except (StopIteration, ValueError):
        print("Invalid input.", file=sys.stderr)
        return 1
    print()
    print(f"E(x) = {expectation(xs, ps):g}")
    print(f"D(x) = {variance(xs, ps):g}")
    print(f"sigma(x) = {standard_deviation(xs, ps):g}")
    return 0