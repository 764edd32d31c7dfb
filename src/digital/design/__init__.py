"""Offline design tools.

- sine_tables: table error study for a given table size (pure Python)
- minimax_polys: error of the shipped atan/asin polynomials, optional refits (numpy + scipy)
- float_params: hex-float dump of every approximation constant
"""

__all__ = ["sine_tables", "minimax_polys", "float_params"]
