# ratekit

A small numerical toolkit for interest-rate and option work, written in plain
Python with no third-party dependencies.

## What it holds

- `ratekit.nr`: the `Ran2` random number generator (seed it with a
  non-positive integer, then call `random()` for deviates in (0, 1)), cubic
  spline setup and evaluation (`spline`, `splint` and their `spline_curve`,
  `splint_curve` variants for lists of `(x, y)` pairs; boundary derivatives
  above 0.99e30 give a natural spline), and the simple `bisec` and `rtsec`
  root finders. `RootNotFoundError` is raised when a solver does not converge.
- `ratekit.spline_interp`: `SplineInterpCurve`, a curve of `(x, y)` points
  whose second derivatives are computed once at construction; call
  `interpolate(x)` to evaluate it.
- `ratekit.root_finding`: Brent's method (`RootFinder.find_root`,
  `find_root`), bracketing helpers (`find_bracket`, which widens an interval
  until it brackets a root and returns it, and `reduce_bracket`, which returns
  up to `max_roots` sub-intervals holding a sign change), the secant method
  (`RootSecant.solve`, `secant_solve`), bisection (`bisector_solve`) and
  `sign`.
- `ratekit.black_scholes`: `bs_price`, `bs_delta` and `bs_gamma` for an
  `OptionType` of `CALL` or `PUT`; `bs_price_cqs` and `bs_delta_cqs`, priced
  from settlement discount factors with `CashPhysical.CASH` or
  `CashPhysical.PHYSICAL` settlement; `implied_volatility`; and
  `generalized_black_scholes`, which returns a frozen `GreeksResult` with
  premium, delta, gamma, vega, theta, rho, theta_mart, volga, vanna, speed and
  charm (all zero once `time_to_expiry <= 0`).
- `ratekit.matrix`: an N-dimensional `Matrix` stored flat in row-major order,
  indexed by a flat integer or a tuple of indices, and a two-dimensional
  `Matrix2` held as rows (or columns when `by_row=False`), with the
  `from_dims` / `to_dims` index helpers.
- `ratekit.rational`: `Rational`, an immutable fraction always kept in lowest
  terms with a positive denominator, with `Rational.parse("3/4")`,
  `increment()` and `decrement()`, and `gcd`.
- `ratekit.nullable`: `Nullable`, a value with a null flag whose comparisons
  (including `!=`) are all false when either side is null.
- `ratekit.triplet`: `Triplet`, a named tuple of `first`, `second`, `third`
  compared lexicographically, and `make_triplet`.
- `ratekit.stringutils`: `split`, `join`, `ltrim`, `rtrim`, `trim`,
  `compress_whitespace`, `uppercase`, and `parse_date` / `format_date` for
  dates written as `15-Jan-2020`.
- `ratekit.market_data`: the `Fixing` (date and optional rate) and
  `YieldCurvePoint` (time in years and zero rate) records.

## Install

```
pip install .
```

## Examples

Pricing a call and recovering its volatility:

```python
from ratekit.black_scholes import OptionType, bs_price, implied_volatility

price = bs_price(OptionType.CALL, 100.0, 100.0, 1.0, 0.05, 0.0, 0.25)
vol = implied_volatility(OptionType.CALL, 100.0, 100.0, 1.0, 0.05, 0.0, price)
```

Finding a root with Brent's method:

```python
from ratekit.root_finding import RootFinder

root = RootFinder().find_root(lambda x: x * x - 2.0, 0.0, 2.0)
```

Interpolating along a natural cubic spline:

```python
from ratekit.spline_interp import SplineInterpCurve

curve = SplineInterpCurve([(0.0, 0.0), (1.0, 1.0), (2.0, 4.0)], 1e30, 1e30)
y = curve.interpolate(1.5)
```

Working with exact fractions:

```python
from ratekit.rational import Rational

total = Rational(1, 2) + Rational(1, 3)
print(total)  # 5/6
```

## Errors

Functions raise rather than return a status flag. A root that is not
bracketed, or input arrays of the wrong length, raise `ValueError`; a solver
that runs out of iterations, or a bracket that cannot be found, raises
`ratekit.nr.RootNotFoundError`.

## What it does not do

`ratekit` holds the building blocks only. It does not build yield curves
from market instruments, and it does not price bonds, deposits, futures or
swaps; `Fixing` and `YieldCurvePoint` are plain records with no curve
behind them. It has no command-line interface.

## Tests

```
pip install .[test]
pytest
```