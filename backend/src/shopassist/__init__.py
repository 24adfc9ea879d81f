"""Shop Assistant backend - voice shopping assistant with product similarity search."""

__version__ = "0.1.0"
