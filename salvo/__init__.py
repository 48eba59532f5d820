"""Attack selection for a CPU opponent in a 10x10 grid combat game."""

__version__ = "0.1.0"
