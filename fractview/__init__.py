"""Fractal rendering into pixel buffers with pan and zoom view state."""

__version__ = "0.1.0"