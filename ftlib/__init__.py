"""Helpers for ASCII characters, strings, byte buffers, descriptor output, line reading, linked lists and grid flood fill."""

__version__ = "0.1.0"