"""Version of the semvalue distribution."""

__version__ = "0.1.0"
