"""Documentation requirement acquisition and staging."""

__version__ = "0.1.0"
