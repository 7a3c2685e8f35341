"""STMTA: Simple Task Management Terminal Application."""

__version__ = "0.1.0"
