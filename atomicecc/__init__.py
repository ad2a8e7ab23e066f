"""Side-channel atomic elliptic-curve arithmetic on P-256, with word-level big integers."""

__version__ = "1.1.1"

__all__ = ["atomic", "bigint", "cli", "constant_time", "field", "scalar"]