"""Asteroids simulation core with a pygame front end."""

__version__ = "0.1.0"
