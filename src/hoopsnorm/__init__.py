"""Box score normalization and validation for loosely-typed basketball stats."""

__version__ = "0.1.0"
