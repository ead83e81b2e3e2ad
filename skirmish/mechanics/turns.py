"""
Turn and phase state machine.

A turn runs movement -> shooting -> critical -> boarding for the active
side. Wrapping back to movement hands control to the other side. When the
scripted opponent gets control it plays its whole turn synchronously and
the machine then walks its remaining phases, so every public call returns
with the player in control again (or the match over).

Invalid requests (wrong phase, wrong side, out of range, nothing selected)
are ignored: the method returns False/None and the state is unchanged.
"""

import logging
import random
from dataclasses import replace
from typing import Optional

from skirmish.generators.data import WEAPON_TEMPLATES
from skirmish.models.customization import CustomizationConfig
from skirmish.models.enums import LogKind, Phase, Side, WeaponType
from skirmish.models.grid import GridCoord
from skirmish.models.match import AttackOutcome, CombatEvent, MatchState

from .combat import resolve_attack
from .movement import MOVE_RANGE, is_in_range, is_valid_move
from .opponent import run_opponent_turn

logger = logging.getLogger(__name__)


class MatchController:
    """
    Entry point for every player action on a match.

    Usage:
        controller = MatchController(generate_match(), rng=make_rng(seed))
        controller.select_unit("player")
        controller.move_selected_unit(GridCoord(6, 5))
        controller.advance_phase()          # -> shooting
        controller.fire_at("opponent-1")
    """

    def __init__(self, state: MatchState, rng=None):
        """
        Args:
            state: The match to drive (mutated in place)
            rng: Random source with ``random()``/``choice()``; a fresh
                ``random.Random`` when omitted
        """
        self.state = state
        self.rng = rng if rng is not None else random.Random()

    # ===== Queries =====

    def get_match_state(self) -> dict:
        """Read-only snapshot of the match for rendering."""
        return self.state.to_dict()

    def get_events(self, since_id: Optional[int] = None, limit: Optional[int] = None) -> list[CombatEvent]:
        """Combat log entries in order, optionally only those after ``since_id``."""
        events = self.state.events
        if since_id is not None:
            events = [e for e in events if e.id > since_id]
        if limit is not None:
            events = events[-limit:] if limit > 0 else []
        return list(events)

    def _player_may_act(self, phase: Phase) -> bool:
        return (
            not self.state.is_over()
            and self.state.active_side is Side.PLAYER
            and self.state.phase is phase
        )

    # ===== Movement phase =====

    def select_unit(self, unit_id: str) -> bool:
        """Select one of the active side's units for movement."""
        if not self._player_may_act(Phase.MOVEMENT):
            return False

        unit = self.state.get_unit(unit_id)
        if unit is None or unit.side is not self.state.active_side:
            return False

        self.state.selected_unit_id = unit.id
        self.state.log(LogKind.SYSTEM, "Ship selected. Awaiting movement orders.")
        return True

    def move_selected_unit(self, target: GridCoord) -> bool:
        """Move the selected unit up to MOVE_RANGE cells (Manhattan)."""
        if not self._player_may_act(Phase.MOVEMENT):
            return False

        unit = self.state.selected_unit
        if unit is None:
            return False
        if not self.state.in_bounds(target.x, target.y):
            return False
        if not is_valid_move(unit.position, target, MOVE_RANGE):
            return False

        old = unit.position
        if target != old:
            unit.facing = old.bearing_to(target)
        unit.position = target
        self.state.selected_unit_id = None
        self.state.log(LogKind.SYSTEM, f"Ship moved from ({old.x},{old.y}) to ({target.x},{target.y}).")
        return True

    # ===== Shooting phase =====

    def select_weapon(self, weapon_type: WeaponType) -> bool:
        """Arm the player's primary or secondary weapon."""
        if self.state.is_over() or weapon_type not in self.state.player_armament:
            return False
        if self.state.get_weapon(weapon_type) is None:
            return False

        self.state.selected_weapon = weapon_type
        message = WEAPON_TEMPLATES.get(weapon_type.value, {}).get(
            "ready_message", f"{weapon_type.value.title()} ready."
        )
        self.state.log(LogKind.SYSTEM, message)
        return True

    def fire_at(self, target_id: str) -> Optional[AttackOutcome]:
        """
        Fire the selected weapon at an opposing unit.

        Returns:
            The attack outcome, or None if the shot was not allowed
        """
        if not self._player_may_act(Phase.SHOOTING):
            return None

        attacker = self.state.player
        target = self.state.get_unit(target_id)
        weapon = self.state.get_weapon(self.state.selected_weapon)
        if attacker is None or target is None or weapon is None:
            return None
        if target.side is attacker.side:
            return None
        if not is_in_range(attacker, target, weapon):
            return None

        outcome = resolve_attack(self.state, attacker, target, weapon, self.rng)
        if self.state.all_opponents_destroyed():
            self.state.log(LogKind.SYSTEM, "All enemy vessels destroyed. Engagement won.")
            logger.info("Match %s won in round %d", self.state.id, self.state.round)
        return outcome

    # ===== Critical phase =====

    def resolve_critical(self) -> bool:
        """Confirm the critical phase and move on to boarding."""
        if not self._player_may_act(Phase.CRITICAL):
            return False

        self.state.log(LogKind.CRITICAL, "Resolving critical system damage...")
        return self.advance_phase()

    # ===== Phase control =====

    def advance_phase(self) -> bool:
        """
        End the current phase.

        Entering the critical phase only logs the phase change; it waits
        there for ``resolve_critical()`` or the next ``advance_phase()``.

        Returns:
            False if the match is already over, True otherwise
        """
        if self.state.is_over():
            return False

        flipped = self.state.turn.advance()
        self.state.selected_unit_id = None

        if not flipped:
            self.state.log(LogKind.SYSTEM, f"Entering {self.state.phase.value} phase.")
            return True

        if self.state.active_side is Side.PLAYER:
            self._start_player_round()
        else:
            self.state.log(LogKind.SYSTEM, "Enemy turn beginning.")
            self._play_opponent_turn()
        return True

    def _start_player_round(self) -> None:
        for unit in self.state.living_units():
            unit.regenerate_shields()
        self.state.log(LogKind.SYSTEM, "Your turn, commander.")
        logger.debug("Match %s: round %d", self.state.id, self.state.round)

    def _play_opponent_turn(self) -> None:
        run_opponent_turn(self.state, self.rng)
        if self.state.player_destroyed():
            self.state.log(LogKind.SYSTEM, "Engagement lost.")
            logger.info("Match %s lost in round %d", self.state.id, self.state.round)
            return

        # Walk the opponent's remaining phases; the wrap hands control back
        while not self.state.is_over() and self.state.active_side is Side.OPPONENT:
            self.advance_phase()

    # ===== Customization =====

    def apply_customization(self, config: CustomizationConfig) -> bool:
        """
        Apply a new loadout to the player's ship.

        Also overrides the catalog damage of the primary and secondary
        weapons, which the opponent's default weapon shares.
        """
        player = self.state.player
        if player is None or self.state.is_over():
            return False

        player.apply_customization(config)
        for weapon_type, damage in (
            (self.state.primary_weapon, config.weapon_damage_primary),
            (self.state.secondary_weapon, config.weapon_damage_secondary),
        ):
            weapon = self.state.get_weapon(weapon_type)
            if weapon is not None:
                self.state.weapons[weapon_type] = replace(weapon, damage=damage)

        self.state.log(LogKind.SYSTEM, "Ship customization complete. New configuration applied.")
        return True
