"""Falling-block puzzle game engine."""

__version__ = "0.1.0"
