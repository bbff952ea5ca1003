"""Traceable maze searches and noughts-and-crosses agents."""

__version__ = "0.1.0"