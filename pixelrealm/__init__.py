"""A small top-down tile-map game with a menu, a walking player and a camera."""

__version__ = "0.1.0"