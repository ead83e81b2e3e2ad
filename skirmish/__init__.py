"""Void Skirmish: turn-based space combat on a grid."""

from .version import __version__

__all__ = ["__version__"]
