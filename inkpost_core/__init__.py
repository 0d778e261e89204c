"""Inkpost Core: user registration, JWT login and blog post storage."""

__version__ = "0.1.0"
