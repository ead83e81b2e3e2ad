"""Weapon archetypes."""

from dataclasses import dataclass

from .enums import WeaponType


@dataclass(frozen=True)
class Weapon:
    """A weapon archetype. Immutable; use ``dataclasses.replace`` to override damage."""
    weapon_type: WeaponType
    damage: float
    range: float  # Grid cells, straight-line
    crit_chance: float = 0.0  # 0..1
    speed: float = 1.0  # Projectile speed, only used by the renderer
    accuracy: float = 1.0
    area_effect: float = 0.0  # Radius in cells, 0 if none
    label: str = ""

    @property
    def name(self) -> str:
        return self.label or self.weapon_type.value.title()

    def in_range(self, distance: float) -> bool:
        """Check whether a target at ``distance`` cells can be engaged."""
        return distance <= self.range

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "weapon_type": self.weapon_type.value,
            "name": self.name,
            "damage": self.damage,
            "range": self.range,
            "crit_chance": self.crit_chance,
            "speed": self.speed,
            "accuracy": self.accuracy,
            "area_effect": self.area_effect,
        }
