"""mockgen — mock action class generator."""

__version__ = "0.1.0"
