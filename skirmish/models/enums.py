"""Enumerations for skirmish game concepts."""

from enum import Enum


class Side(Enum):
    """Which side of the engagement a unit fights for."""
    PLAYER = "player"
    OPPONENT = "opponent"

    @property
    def other(self) -> "Side":
        """The opposing side."""
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER


class Phase(Enum):
    """Sub-steps of a side's turn, in play order."""
    MOVEMENT = "movement"
    SHOOTING = "shooting"
    CRITICAL = "critical"
    BOARDING = "boarding"


# Order matters: the tracker cycles through this list.
PHASE_ORDER = [Phase.MOVEMENT, Phase.SHOOTING, Phase.CRITICAL, Phase.BOARDING]


class HullClass(Enum):
    """Hull classes available to a ship.

    Each class fixes the ship's maximum hull, speed and armor.
    """
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"

    @property
    def max_hull(self) -> int:
        return {
            HullClass.LIGHT: 75,
            HullClass.MEDIUM: 100,
            HullClass.HEAVY: 150,
        }[self]

    @property
    def speed(self) -> float:
        return {
            HullClass.LIGHT: 1.5,
            HullClass.MEDIUM: 1.0,
            HullClass.HEAVY: 0.7,
        }[self]

    @property
    def armor(self) -> int:
        return {
            HullClass.LIGHT: 2,
            HullClass.MEDIUM: 5,
            HullClass.HEAVY: 8,
        }[self]


class WeaponType(Enum):
    """Weapon archetypes."""
    LASER = "laser"
    TORPEDO = "torpedo"
    PLASMA = "plasma"
    RAILGUN = "railgun"
    MISSILE = "missile"


class SystemType(Enum):
    """Ship subsystems that a critical hit can degrade."""
    ENGINES = "engines"
    WEAPONS = "weapons"
    SHIELDS = "shields"


class OutcomeKind(Enum):
    """How an attack landed."""
    SHIELD_HIT = "shield_hit"
    HULL_HIT = "hull_hit"


class LogKind(Enum):
    """Category of a combat log entry (drives styling in the log panel)."""
    SYSTEM = "system"
    SHIELD = "shield"
    HIT = "hit"
    CRITICAL = "critical"
