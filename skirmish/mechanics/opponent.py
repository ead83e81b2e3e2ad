"""Scripted opponent: close in on the player and fire when in range."""

import logging

from skirmish.models.enums import LogKind
from skirmish.models.match import AttackOutcome, MatchState

from .combat import resolve_attack
from .movement import is_in_range

logger = logging.getLogger(__name__)


def run_opponent_turn(state: MatchState, rng=None) -> list[AttackOutcome]:
    """
    Move and fire with every living opponent unit, in order.

    Each unit steps one cell toward the player on each axis (a sign step,
    not a normalized vector), turns to face the player, then fires the
    default weapon if the player is in range. Stops as soon as the player
    is destroyed.

    Returns:
        Outcomes of the shots fired this turn
    """
    outcomes = []
    weapon = state.get_weapon(state.default_weapon)

    for unit in list(state.opponents):
        player = state.player
        if player is None:
            break

        old = unit.position
        unit.facing = old.bearing_to(player.position)
        unit.position = old.step_toward(player.position)
        state.log(
            LogKind.SYSTEM,
            f"Enemy moved from ({old.x},{old.y}) to ({unit.position.x},{unit.position.y}).",
        )

        if weapon is not None and is_in_range(unit, player, weapon):
            state.log(LogKind.SYSTEM, "Enemy vessel opening fire!")
            outcomes.append(resolve_attack(state, unit, player, weapon, rng))

    logger.debug("Opponent turn fired %d shot(s)", len(outcomes))
    return outcomes
