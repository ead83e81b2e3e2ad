"""Weapon catalog and match setup."""

from typing import Optional

from skirmish.models.enums import LogKind, WeaponType
from skirmish.models.grid import GridCoord
from skirmish.models.match import MatchState
from skirmish.models.unit import Unit
from skirmish.models.weapon import Weapon
from .data import (
    WEAPON_TEMPLATES, PRIMARY_WEAPON, SECONDARY_WEAPON,
    PLAYER_START, OPPONENT_STARTS, OPPONENT_NAMES,
    DEFAULT_GRID_WIDTH, DEFAULT_GRID_HEIGHT,
)

OPPONENT_COLOR = "#ff0000"


def get_weapon(weapon_type: WeaponType) -> Weapon:
    """Create a Weapon from its archetype template."""
    template = WEAPON_TEMPLATES[weapon_type.value]
    return Weapon(
        weapon_type=weapon_type,
        damage=template["damage"],
        range=template["range"],
        crit_chance=template.get("crit_chance", 0.0),
        speed=template.get("speed", 1.0),
        accuracy=template.get("accuracy", 1.0),
        area_effect=template.get("area_effect", 0.0),
        label=template.get("label", ""),
    )


def build_weapon_catalog() -> dict:
    """One weapon per archetype, keyed by WeaponType."""
    return {weapon_type: get_weapon(weapon_type) for weapon_type in WeaponType}


def generate_player(position: Optional[GridCoord] = None) -> Unit:
    """Create the player's flagship with stock stats."""
    return Unit(
        id="player",
        name="Vanguard",
        position=position or GridCoord(*PLAYER_START),
        is_player_controlled=True,
        primary_damage=WEAPON_TEMPLATES[PRIMARY_WEAPON]["damage"],
        secondary_damage=WEAPON_TEMPLATES[SECONDARY_WEAPON]["damage"],
    )


def generate_opponent(index: int, position: Optional[GridCoord] = None) -> Unit:
    """Create the ``index``-th (0-based) scripted opponent."""
    if position is None:
        position = GridCoord(*OPPONENT_STARTS[index % len(OPPONENT_STARTS)])
    return Unit(
        id=f"opponent-{index + 1}",
        name=OPPONENT_NAMES[index % len(OPPONENT_NAMES)],
        position=position,
        color=OPPONENT_COLOR,
    )


def generate_match(
    opponent_count: int = 2,
    name: str = "Skirmish",
    grid_width: int = DEFAULT_GRID_WIDTH,
    grid_height: int = DEFAULT_GRID_HEIGHT,
) -> MatchState:
    """
    Set up a fresh engagement.

    Args:
        opponent_count: Number of scripted opponents (clamped to the available start positions)
        name: Display name of the match
        grid_width: Grid width in cells
        grid_height: Grid height in cells

    Returns:
        A MatchState at round 1, player's movement phase
    """
    opponent_count = max(1, min(opponent_count, len(OPPONENT_STARTS)))
    state = MatchState(
        name=name,
        player=generate_player(),
        opponents=[generate_opponent(i) for i in range(opponent_count)],
        weapons=build_weapon_catalog(),
        primary_weapon=WeaponType(PRIMARY_WEAPON),
        secondary_weapon=WeaponType(SECONDARY_WEAPON),
        selected_weapon=WeaponType(PRIMARY_WEAPON),
        default_weapon=WeaponType(PRIMARY_WEAPON),
        grid_width=grid_width,
        grid_height=grid_height,
    )
    state.log(LogKind.SYSTEM, "Combat engagement initiated. Standing by for orders.")
    return state
