"""Parser input streams with position tracking, buffering, backtracking and structured errors."""

__version__ = "0.1.0"

__all__ = [
    "buf_reader",
    "buffered",
    "combine_buffer",
    "decoder",
    "easy",
    "easy_errors",
    "position",
    "read",
    "span",
    "state",
]