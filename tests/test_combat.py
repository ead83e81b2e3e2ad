"""
Tests for attack resolution.

Tests cover:
- Shield hit vs hull hit classification
- Critical roll against the weapon's crit chance
- Destruction and removal from play
- Combat log narration
"""

import pytest

from skirmish.mechanics import resolve_attack, roll_critical
from skirmish.models import (
    LogKind, MatchState, OutcomeKind, Side, SystemType, Weapon, WeaponType,
)
from tests.conftest import ScriptedRandom


@pytest.fixture
def skirmish(make_unit):
    """A bare match with one player and one opponent."""
    player = make_unit("player", 5, 5, player=True)
    opponent = make_unit("opponent-1", 2, 2)
    state = MatchState(player=player, opponents=[opponent])
    return state, player, opponent


def heavy_weapon(damage=120, crit_chance=0.0):
    return Weapon(weapon_type=WeaponType.TORPEDO, damage=damage, range=12, crit_chance=crit_chance)


class TestRollCritical:
    """Tests for the critical roll itself."""

    def test_draw_under_chance_crits(self):
        assert roll_critical(0.2, ScriptedRandom(draws=[0.1])) is True

    def test_draw_over_chance_does_not(self):
        assert roll_critical(0.2, ScriptedRandom(draws=[0.3])) is False

    def test_zero_chance_never_crits(self):
        assert roll_critical(0.0, ScriptedRandom(draws=[0.0])) is False


class TestClassification:
    """Tests for shield/hull hit classification."""

    def test_overflow_is_shield_hit(self, skirmish, rng):
        """Test that a hit collapsing the shields is reported against shields."""
        state, player, opponent = skirmish
        outcome = resolve_attack(state, player, opponent, heavy_weapon(), rng)

        assert opponent.shield == 0
        assert opponent.hull == 85
        assert outcome.kind is OutcomeKind.SHIELD_HIT
        assert outcome.before == 100
        assert outcome.after == 0
        assert outcome.before_percent == pytest.approx(100)
        assert outcome.after_percent == pytest.approx(0)
        assert outcome.destroyed is False

    def test_shields_down_is_hull_hit(self, skirmish, rng):
        """Test that a hit with shields already down is reported against hull."""
        state, player, opponent = skirmish
        opponent.shield = 0
        outcome = resolve_attack(state, player, opponent, heavy_weapon(damage=25), rng)

        assert outcome.kind is OutcomeKind.HULL_HIT
        assert outcome.before == 100
        assert outcome.after == 80
        assert outcome.after_percent == pytest.approx(80)

    def test_shield_hit_log(self, skirmish, rng, laser):
        """Test the shield hit narration."""
        state, player, opponent = skirmish
        resolve_attack(state, player, opponent, laser, rng)

        event = state.events[-1]
        assert event.kind is LogKind.SHIELD
        assert "Macro batteries hit enemy shields" in event.message
        assert "from 100% to 90%" in event.message

    def test_hull_hit_on_player_log(self, skirmish, rng, laser):
        """Test the hull hit narration when the player is the target."""
        state, player, opponent = skirmish
        player.shield = 0
        resolve_attack(state, opponent, player, laser, rng)

        event = state.events[-1]
        assert event.kind is LogKind.HIT
        assert "Direct hit on your hull" in event.message
        assert player.hull == 95


class TestCriticalHits:
    """Tests for critical effects triggered by attacks."""

    def test_forced_low_draw_triggers_critical(self, skirmish):
        """Test that a draw of 0.1 against 20% crit chance applies a critical effect."""
        state, player, opponent = skirmish
        rng = ScriptedRandom(draws=[0.1], choices=[SystemType.SHIELDS])
        outcome = resolve_attack(state, player, opponent, heavy_weapon(damage=10, crit_chance=0.2), rng)

        assert outcome.critical is True
        assert outcome.critical_system is SystemType.SHIELDS
        assert opponent.systems_damaged[SystemType.SHIELDS] is True
        assert opponent.shield_regen_rate == 3
        critical_messages = [e.message for e in state.events if e.kind is LogKind.CRITICAL]
        assert "Critical hit by torpedo! Systems may be impaired." in critical_messages
        assert "Shield generator damaged: slower regeneration." in critical_messages

    def test_forced_high_draw_does_not(self, skirmish):
        """Test that a draw of 0.3 against 20% crit chance leaves systems intact."""
        state, player, opponent = skirmish
        rng = ScriptedRandom(draws=[0.3])
        outcome = resolve_attack(state, player, opponent, heavy_weapon(damage=10, crit_chance=0.2), rng)

        assert outcome.critical is False
        assert outcome.critical_system is None
        assert not opponent.has_system_damage()

    def test_critical_does_not_change_classification(self, skirmish):
        """Test that a shield generator critical still reports a shield hit."""
        state, player, opponent = skirmish
        rng = ScriptedRandom(draws=[0.0], choices=[SystemType.SHIELDS])
        outcome = resolve_attack(state, player, opponent, heavy_weapon(damage=10, crit_chance=0.5), rng)
        assert outcome.kind is OutcomeKind.SHIELD_HIT


class TestDestruction:
    """Tests for destroying units."""

    def test_destroyed_opponent_removed(self, skirmish, rng):
        """Test that a destroyed opponent is taken out of the opponent list."""
        state, player, opponent = skirmish
        opponent.shield = 0
        opponent.hull = 10
        outcome = resolve_attack(state, player, opponent, heavy_weapon(damage=50), rng)

        assert outcome.destroyed is True
        assert opponent.is_destroyed()
        assert opponent not in state.opponents
        assert state.get_unit("opponent-1") is None
        assert state.events[-1].message == "Enemy vessel destroyed!"
        assert state.winner() is Side.PLAYER

    def test_destroyed_player_removed(self, skirmish, rng):
        """Test that a destroyed player unit leaves play and the opponent wins."""
        state, player, opponent = skirmish
        player.shield = 0
        player.hull = 1
        outcome = resolve_attack(state, opponent, player, heavy_weapon(damage=50), rng)

        assert outcome.destroyed is True
        assert state.player is None
        assert state.winner() is Side.OPPONENT
        assert state.events[-1].message == "Your vessel has been destroyed!"

    def test_survivor_stays(self, skirmish, rng, laser):
        state, player, opponent = skirmish
        outcome = resolve_attack(state, player, opponent, laser, rng)
        assert outcome.destroyed is False
        assert opponent in state.opponents
