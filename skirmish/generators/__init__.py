"""Match and weapon catalog setup."""

from .match import generate_match, build_weapon_catalog, get_weapon

__all__ = ["generate_match", "build_weapon_catalog", "get_weapon"]
