"""Numerical integration of classic strange attractors with CSV export."""

__version__ = "0.1.0"