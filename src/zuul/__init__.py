"""Zuul - world model for a small text adventure."""

__version__ = "0.1.0"
