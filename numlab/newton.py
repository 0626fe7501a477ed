"""Newton's method for a system of two quadratic equations in x and y."""

import argparse
import sys
import warnings
from dataclasses import dataclass


@dataclass(frozen=True)
class Quadratic:
    """The function a*x^2 + b*y^2 + c*x*y + d*x + e*y + f."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    def value(self, x, y):
        return self.a * x**2 + self.b * y**2 + self.c * x * y + self.d * x + self.e * y + self.f

    def dx(self, x, y):
        return 2 * self.a * x + self.c * y + self.d

    def dy(self, x, y):
        return 2 * self.b * y + self.c * x + self.e


def jacobian(f1, f2, x, y):
    """Return the Jacobian of (f1, f2) at (x, y) as a 2x2 tuple."""
    return ((f1.dx(x, y), f1.dy(x, y)), (f2.dx(x, y), f2.dy(x, y)))


def solve_2x2(j, rhs):
    """Solve j * s == rhs by Cramer's rule; raise ValueError if j is singular."""
    (a, b), (c, d) = j
    det = a * d - c * b
    if det == 0:
        raise ValueError("matrix is singular")
    d1 = rhs[0] * d - rhs[1] * b
    d2 = a * rhs[1] - c * rhs[0]
    return d1 / det, d2 / det


def newton_method(f1, f2, iterations, x, y):
    """Run a fixed number of Newton steps from (x, y) and return the point reached.

    If the Jacobian becomes degenerate a RuntimeWarning is issued and the
    current point is returned.
    """
    for _ in range(iterations):
        residual = (-f1.value(x, y), -f2.value(x, y))
        try:
            step_x, step_y = solve_2x2(jacobian(f1, f2, x, y), residual)
        except ValueError:
            warnings.warn("Jacobian is degenerate, stopping.", RuntimeWarning, stacklevel=2)
            break
        x += step_x
        y += step_y
    return x, y


def _tokens(stream):
    for line in stream:
        yield from line.split()


def main(argv=None):
    """Read two equations, a start point and an iteration count from standard input."""
    argparse.ArgumentParser(
        description="Solve two quadratic equations in x and y by Newton's method."
    ).parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Equations must look like this: A*(x^2)+B*(y^2)+C*xy+D*x+E*y+F=0.")
        print("Enter coefficients for the first equation:")
        f1 = Quadratic(*(float(next(tokens)) for _ in range(6)))
        print("Enter coefficients for the second equation:")
        f2 = Quadratic(*(float(next(tokens)) for _ in range(6)))
        print("Enter the initial approximation (x, y):")
        x0 = float(next(tokens))
        y0 = float(next(tokens))
        print("Enter the amount of iterations: ", end="", flush=True)
        iterations = int(next(tokens))
    except (StopIteration, ValueError):
        print("Invalid input.", file=sys.stderr)
        return 1
    print()
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        x, y = newton_method(f1, f2, iterations, x0, y0)
    for warning in caught:
        print(f"\n{warning.message}")
    print(f"Result: x = {x:g}, y = {y:g}")
    return 0