"""Interactive sandbox for drawing 2D vectors and bouncing a ball off them."""

__version__ = "0.1.0"