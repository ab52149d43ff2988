"""Version information for optscan."""

__version__ = "2.1.0"
