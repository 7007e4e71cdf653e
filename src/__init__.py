# src/__init__.py — v1
"""hubtags: core users, close friends and community hashtags of a social graph."""

from hubtags.version import __version__

__all__ = ["__version__"]
