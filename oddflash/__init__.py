"""Oddball flash stimulus with TCP event triggers."""

__version__ = "0.1.0"