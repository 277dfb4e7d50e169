"""Console planner that checks factory orders against production time and parts in stock."""

__version__ = "0.1.0"
__all__ = ["__version__"]