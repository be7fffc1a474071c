"""C-style byte and string helpers, a printf-style formatter and a buffered line reader."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "transform", "output", "printf", "lines"]