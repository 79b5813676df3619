"""Daily puzzle runner with timing, plus 2D point and grid helpers."""

__version__ = "0.1.0"
__all__ = ["cli", "days", "grid", "point", "solution"]