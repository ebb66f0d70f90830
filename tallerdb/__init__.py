"""Fixed-size record types and files for a vehicle repair workshop."""

__version__ = "0.1.0"
__all__ = ["__version__"]