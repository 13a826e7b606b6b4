"""Build-time metadata index for the articles repository."""

__version__ = "0.1.0"
