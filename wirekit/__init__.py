"""Sketch-style core helpers: strings, print/println output, number formatting, math and timing."""

__version__ = "0.1.0"

__all__ = [
    "numconv",
    "text_search",
    "astring",
    "wmath",
    "timing",
    "printer",
]