"""Parametric cabinet construction and technical drawing engine."""

__version__ = "0.1.0"
