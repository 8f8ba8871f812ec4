"""Valve gear sizing calculator for steam locomotives."""

__version__ = "1.0.0"
