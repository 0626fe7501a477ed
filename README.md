# numlab

A set of small, dependency-free numerical methods working on plain Python
lists. Each one can be used as a library function or run as an interactive
console command.

## Installation

```
pip install .
```

Add the `test` extra to get pytest: `pip install ".[test]"`.

## Library use

```python
from numlab.cholesky import cholesky_decompose, solve_slae
from numlab.determinant import determinant
from numlab.lagrange import lagrange_value
from numlab.integration import simpson, trapezoid, integrand

a = [[4.0, 2.0], [2.0, 3.0]]
l = cholesky_decompose(a)
x = solve_slae(l, [6.0, 5.0])

determinant([[1.0, 2.0], [3.0, 4.0]])                  # -2.0
lagrange_value([0.0, 1.0, 2.0], [0.0, 1.0, 4.0], 3.0)  # 9.0
simpson(0.0, 1.0, 10, integrand)
```

Matrices are lists of rows; vectors are lists of numbers.

### Modules

- `numlab.cholesky`: `cholesky_decompose(a)` returns the lower triangular `L`
  with `L L^T = a`; `solve_lower`, `solve_upper` and `solve_slae(l, rhs)` solve
  the system by forward and back substitution; `transpose` and `is_symmetric`
  are helpers. A matrix with no Cholesky factor raises
  `NotPositiveDefiniteError`; an empty or non-square matrix raises
  `ValueError`. The `numlab-cholesky` command rejects a non-symmetric input
  with `NotSymmetricError`'s message.
- `numlab.determinant`: `determinant(a)` by cofactor expansion along the first
  row. An empty or non-square matrix raises `ValueError`.
- `numlab.hilbert`: `hilbert_matrix(rows, columns)` with entries
  `1 / (i + j + 1)`.
- `numlab.lagrange`: `lagrange_value(xs, fs, point)` evaluates the
  interpolation polynomial through the points `(xs[i], fs[i])`.
- `numlab.lu`: `lu_decompose(a)` returns `(L, U)` without pivoting, with a unit
  diagonal in `L`; a zero pivot raises `ZeroDivisionError`.
- `numlab.discrete_stats`: `expectation`, `variance` and `standard_deviation`
  of a discrete random variable given its values and probabilities.
  `standard_deviation` returns NaN when the variance is negative.
- `numlab.newton`: `Quadratic(a, b, c, d, e, f)` is the function
  `a*x^2 + b*y^2 + c*x*y + d*x + e*y + f` with `value`, `dx` and `dy`;
  `jacobian`, `solve_2x2` (Cramer's rule, `ValueError` when singular) and
  `newton_method(f1, f2, iterations, x, y)`, which runs a fixed number of
  steps and returns `(x, y)`. If the Jacobian becomes degenerate it issues a
  `RuntimeWarning` and returns the point reached so far.
- `numlab.integration`: `uniform_grid(a, b, n)`, and the composite rules
  `simpson(a, b, n, func)` and `trapezoid(a, b, n, func)`; `func` defaults to
  `integrand`, which is `-2 - 7x + 4x^2`.
- `numlab.random_matrix`: `random_lower_triangular(n, rng)` (digits 0 to 9,
  `rng` an optional `random.Random`), `transpose` and `multiply`, for building
  a symmetric positive semi-definite matrix `L @ L^T`.

## Commands

Each command prompts for its input on standard input and prints the result.
Numbers may be separated by spaces or line breaks. A command exits with
status 1 on invalid input.

```
numlab-cholesky        # solve A x = rhs by Cholesky decomposition
numlab-determinant     # determinant of a square matrix
numlab-hilbert         # print a Hilbert matrix
numlab-lagrange        # evaluate a Lagrange interpolation polynomial
numlab-lu              # LU decomposition of a square matrix
numlab-stats           # E(x), D(x) and sigma(x) of a discrete distribution
numlab-newton          # Newton's method for two quadratic equations
numlab-integrate       # Simpson and trapezoid rules
numlab-random-matrix   # random L and A = L L^T
```

## Limitations

- The commands read only from standard input and take no options; there is
  no reading from or writing to files.
- `numlab-integrate` always integrates the built-in `-2 - 7x + 4x^2`; other
  functions can only be passed through the library functions.
- The decompositions do no pivoting, and `determinant` uses cofactor
  expansion, so they suit small matrices only.