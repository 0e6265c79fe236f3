"""Version information for console-games."""

__version__ = "0.1.0"
