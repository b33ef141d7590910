"""Interactive serial-line console with a keyword command engine."""

__version__ = "0.1.0"