"""Isoghost: collect treasure with a ghost on a random isometric island."""

__version__ = "1.0.0"
