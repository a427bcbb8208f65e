"""Statistics, distribution measures, moving averages and transforms for numeric data series."""

__version__ = "0.1.0"
__all__ = ["distribution", "errors", "smoothing", "stats", "transforms", "weighted"]