"""A turn-based battle game and a handful of small console utilities."""

__version__ = "0.1.0"