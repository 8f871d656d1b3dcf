"""Insurance administration testing-playground API."""

__version__ = "1.0.0"
