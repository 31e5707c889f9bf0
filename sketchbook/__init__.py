"""Animated drawing sketches (boxes, spiral, limit of 1/n) that produce shapes drawn with pygame."""

__version__ = "0.1.0"
__all__ = ["__version__"]