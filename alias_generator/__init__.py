"""Persistent cmd.exe aliases backed by generated ``.cmd`` shims."""

__version__ = "0.1.0"
