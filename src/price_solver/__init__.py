"""Gold / Silver / Bitcoin price solver."""

__version__ = "0.1.0"
