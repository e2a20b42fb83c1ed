"""Sample elevation grid generator."""

__version__ = "0.1.0"
