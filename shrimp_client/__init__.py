"""Pygame viewer for the shrimp arena game."""
