"""printf-style formatting with C conversion rules, plus small number, string and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["spec", "numconv", "convert", "printf", "strutil", "lines"]