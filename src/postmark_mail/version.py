"""Library version."""

__version__ = "0.1"
