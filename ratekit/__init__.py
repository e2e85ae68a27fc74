"""Root finders, cubic splines, Black-Scholes pricing and small value types for rates work."""

__version__ = "0.1.0"

__all__ = [
    "black_scholes",
    "market_data",
    "matrix",
    "nr",
    "nullable",
    "rational",
    "root_finding",
    "spline_interp",
    "stringutils",
    "triplet",
]