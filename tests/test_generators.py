"""
Tests for the weapon catalog and match setup.
"""

import pytest

from skirmish.generators import build_weapon_catalog, generate_match, get_weapon
from skirmish.models import GridCoord, Phase, Side, WeaponType


class TestWeaponCatalog:
    """Tests for weapon archetypes."""

    def test_every_archetype_present(self):
        catalog = build_weapon_catalog()
        assert set(catalog) == set(WeaponType)

    def test_stock_laser(self):
        laser = get_weapon(WeaponType.LASER)
        assert laser.damage == 10
        assert laser.range == 8
        assert laser.crit_chance == pytest.approx(0.1)
        assert laser.name == "Macro batteries"

    def test_stock_torpedo(self):
        torpedo = get_weapon(WeaponType.TORPEDO)
        assert torpedo.damage == 25
        assert torpedo.range == 12
        assert torpedo.crit_chance == pytest.approx(0.2)

    def test_range_check(self):
        laser = get_weapon(WeaponType.LASER)
        assert laser.in_range(8.0)
        assert not laser.in_range(8.01)


class TestGenerateMatch:
    """Tests for fresh match setup."""

    def test_opening_positions(self):
        state = generate_match()
        assert state.player.position == GridCoord(5, 5)
        assert [u.position for u in state.opponents] == [GridCoord(2, 2), GridCoord(8, 2)]
        assert all(u.side is Side.OPPONENT for u in state.opponents)

    def test_opening_turn(self):
        state = generate_match()
        assert state.round == 1
        assert state.phase is Phase.MOVEMENT
        assert state.active_side is Side.PLAYER
        assert state.selected_weapon is WeaponType.LASER

    def test_opening_log(self):
        state = generate_match()
        assert len(state.events) == 1
        assert state.events[0].message == "Combat engagement initiated. Standing by for orders."

    @pytest.mark.parametrize("requested,expected", [(0, 1), (3, 3), (6, 6), (20, 6)])
    def test_opponent_count_clamped(self, requested, expected):
        """Test that the opponent count is clamped to the available start positions."""
        assert len(generate_match(opponent_count=requested).opponents) == expected

    def test_unique_ids(self):
        state = generate_match(opponent_count=6)
        ids = [u.id for u in state.living_units()]
        assert len(ids) == len(set(ids))
