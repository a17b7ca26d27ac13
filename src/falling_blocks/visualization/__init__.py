"""Pygame presentation adapter: renderer and keyboard host loop."""
