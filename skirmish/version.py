"""Version information for Void Skirmish."""

__version__ = "0.1.0"
