"""Web interface for Void Skirmish."""

from .app import create_app

__all__ = ["create_app"]
