"""Parse display specifications, choose matching display modes and keep named profiles."""

__version__ = "0.1.0"

__all__ = ["__version__"]