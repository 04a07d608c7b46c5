"""Fit tetrominoes into the smallest square, with small text, byte and list helpers."""

__version__ = "1.0.0"