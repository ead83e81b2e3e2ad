"""Data models for Void Skirmish."""

from .enums import Side, Phase, HullClass, WeaponType, SystemType, OutcomeKind, LogKind
from .grid import GridCoord
from .customization import CustomizationConfig
from .unit import Unit
from .weapon import Weapon
from .match import MatchState, TurnTracker, CombatEvent, AttackOutcome

__all__ = [
    "Side",
    "Phase",
    "HullClass",
    "WeaponType",
    "SystemType",
    "OutcomeKind",
    "LogKind",
    "GridCoord",
    "CustomizationConfig",
    "Unit",
    "Weapon",
    "MatchState",
    "TurnTracker",
    "CombatEvent",
    "AttackOutcome",
]
