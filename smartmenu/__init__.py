"""Interactive terminal menu runner with remembered command variables."""

__version__ = "1.0.0"

__all__ = ["__version__"]
