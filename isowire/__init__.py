"""Isometric wireframe viewer for height-map files, with its supporting helpers."""

__version__ = "0.1.0"