"""Doctor Portal - practice management backend for doctors."""

__version__ = "1.0.0"
