"""Report the largest directories under a root path."""

__version__ = "0.1.0"
