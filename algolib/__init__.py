"""Classic data structures, graph algorithms, sorts and number-theory routines."""

__version__ = "0.1.0"