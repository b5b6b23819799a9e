"""Level metadata, progress, text and play-time helpers."""

__version__ = "0.1.0"