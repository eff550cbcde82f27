"""printf-style formatting with flags, width and precision, plus string and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["convert", "layout", "linereader", "numconv", "printf", "spec", "textutils"]