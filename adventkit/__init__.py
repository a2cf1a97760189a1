"""Daily puzzle solvers, byte-parsing helpers and a solver process protocol."""

__version__ = "0.1.0"