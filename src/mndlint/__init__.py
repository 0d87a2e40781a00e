"""mndlint: magic number detector for Go source code."""

__version__ = "0.1.0"
