"""Classic algorithm solutions and two small data structures."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "backtracking",
    "searching",
    "sliding_window",
    "strings",
    "structures",
]