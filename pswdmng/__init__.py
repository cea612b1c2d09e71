"""Command-line password manager keeping one SQLite store per account."""

__version__ = "0.1.0"
__all__ = ["__version__"]