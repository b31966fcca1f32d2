"""CuTE - a terminal menu for building curl and wget commands."""

__version__ = "0.1.0"
