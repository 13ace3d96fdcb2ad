"""Terminal viewer for the hexagonal board."""

__version__ = "0.1.0"
