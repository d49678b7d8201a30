"""taskrecur - recurring task occurrence generator."""

__version__ = "1.0.0"
