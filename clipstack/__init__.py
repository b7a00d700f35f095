"""Clipboard history with fuzzy search, JSON persistence and a Tk picker window."""

__version__ = "0.1.0"
__all__ = ["__version__"]