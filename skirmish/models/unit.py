"""Ship combat state and damage resolution."""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from .customization import CustomizationConfig
from .enums import HullClass, Side, SystemType
from .grid import GridCoord

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#00ff00"

CRITICAL_EFFECT_MESSAGES = {
    SystemType.ENGINES: "Engine damage: speed reduced.",
    SystemType.WEAPONS: "Weapon systems impaired: damage output reduced.",
    SystemType.SHIELDS: "Shield generator damaged: slower regeneration.",
}


def _undamaged_systems() -> dict:
    return {system: False for system in SystemType}


@dataclass
class Unit:
    """A ship on the tactical grid (player or opponent)."""
    id: str
    name: str = ""
    position: GridCoord = field(default_factory=GridCoord)
    facing: float = 0.0  # radians
    is_player_controlled: bool = False
    color: str = DEFAULT_COLOR
    hull_class: HullClass = HullClass.MEDIUM
    # Use None to indicate "take it from the hull class / max value"
    max_hull: Optional[int] = None
    hull: Optional[float] = None
    max_shield: int = 100
    shield: Optional[float] = None
    shield_regen_rate: int = 5
    armor: Optional[int] = None
    speed: Optional[float] = None
    evasion: float = 0.1  # Chance to evade; carried for display only
    primary_damage: float = 10
    secondary_damage: float = 25
    systems_damaged: dict = field(default_factory=_undamaged_systems)

    def __post_init__(self):
        """Fill derived values from the hull class only if not explicitly set."""
        if self.max_hull is None:
            self.max_hull = self.hull_class.max_hull
        if self.hull is None:
            self.hull = self.max_hull
        if self.speed is None:
            self.speed = self.hull_class.speed
        if self.armor is None:
            self.armor = self.hull_class.armor
        if self.shield is None:
            self.shield = self.max_shield
        if not self.name:
            self.name = self.id

    @property
    def side(self) -> Side:
        return Side.PLAYER if self.is_player_controlled else Side.OPPONENT

    @property
    def hull_percent(self) -> float:
        return _percent(self.hull, self.max_hull)

    @property
    def shield_percent(self) -> float:
        return _percent(self.shield, self.max_shield)

    def apply_hull_modifiers(self) -> None:
        """Reset max hull, hull, speed and armor from the hull class table."""
        self.max_hull = self.hull_class.max_hull
        self.hull = self.max_hull
        self.speed = self.hull_class.speed
        self.armor = self.hull_class.armor

    def apply_damage(self, amount: float) -> None:
        """
        Apply incoming damage. Shields absorb first, then hull.

        Armor only reduces damage that reaches the hull: either the overflow
        past a collapsing shield, or the full hit when shields are already down.
        """
        if self.shield > 0:
            self.shield -= amount
            if self.shield < 0:
                overflow = abs(self.shield)
                self.shield = 0
                self.hull -= max(overflow - self.armor, 0)
        else:
            self.hull -= max(amount - self.armor, 0)

        self.hull = max(self.hull, 0)
        self.shield = max(self.shield, 0)

    def apply_critical_effect(self, rng=None) -> SystemType:
        """
        Damage a random subsystem and degrade it.

        The penalty is applied on every hit, so repeated hits on the same
        system compound.

        Args:
            rng: Random source with a ``choice`` method (defaults to ``random``)

        Returns:
            The system that was hit
        """
        rng = rng or random
        system = rng.choice(list(SystemType))
        self.systems_damaged[system] = True

        if system == SystemType.ENGINES:
            self.speed *= 0.7
        elif system == SystemType.WEAPONS:
            self.primary_damage *= 0.8
            self.secondary_damage *= 0.8
        elif system == SystemType.SHIELDS:
            self.shield_regen_rate = max(1, self.shield_regen_rate - 2)

        logger.debug("%s critical: %s", self.id, CRITICAL_EFFECT_MESSAGES[system])
        return system

    def regenerate_shields(self) -> None:
        """Recharge shields by the regen rate, up to the maximum."""
        if self.shield < self.max_shield:
            self.shield = min(self.max_shield, self.shield + self.shield_regen_rate)

    def is_destroyed(self) -> bool:
        """Check if hull integrity has reached zero."""
        return self.hull <= 0

    def has_system_damage(self) -> bool:
        return any(self.systems_damaged.values())

    def apply_customization(self, config: CustomizationConfig) -> None:
        """
        Apply a loadout from the customization form.

        Shields come back to full, the hull class table is re-applied (which
        also restores the hull) and all critical damage is cleared.
        """
        self.color = config.color
        self.hull_class = config.hull_type
        self.max_shield = config.shield_capacity
        self.shield = self.max_shield
        self.shield_regen_rate = config.shield_regen
        self.primary_damage = config.weapon_damage_primary
        self.secondary_damage = config.weapon_damage_secondary

        self.apply_hull_modifiers()
        self.systems_damaged = _undamaged_systems()

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "side": self.side.value,
            "position": self.position.to_dict(),
            "facing": self.facing,
            "color": self.color,
            "hull_class": self.hull_class.value,
            "hull": self.hull,
            "max_hull": self.max_hull,
            "hull_percent": self.hull_percent,
            "shield": self.shield,
            "max_shield": self.max_shield,
            "shield_percent": self.shield_percent,
            "shield_regen_rate": self.shield_regen_rate,
            "armor": self.armor,
            "speed": self.speed,
            "evasion": self.evasion,
            "primary_damage": self.primary_damage,
            "secondary_damage": self.secondary_damage,
            "systems_damaged": {
                system.value: damaged for system, damaged in self.systems_damaged.items()
            },
            "is_destroyed": self.is_destroyed(),
        }


def _percent(value: float, maximum: float) -> float:
    if not maximum:
        return 0.0
    return value / maximum * 100
