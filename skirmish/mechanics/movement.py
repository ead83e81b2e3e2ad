"""
Grid movement and range checks.

Ships move up to MOVE_RANGE cells per movement phase, measured as
Manhattan distance. Weapon range is measured in a straight line.
"""

from dataclasses import dataclass

from skirmish.models.grid import GridCoord
from skirmish.models.match import MatchState
from skirmish.models.unit import Unit
from skirmish.models.weapon import Weapon

MOVE_RANGE = 3


@dataclass
class ValidMove:
    """A reachable destination for a selected unit."""
    coord: GridCoord
    distance: int

    def to_dict(self) -> dict:
        return {**self.coord.to_dict(), "distance": self.distance}


def is_valid_move(origin: GridCoord, destination: GridCoord, max_distance: int = MOVE_RANGE) -> bool:
    """Check that a destination is within movement range."""
    return origin.manhattan_to(destination) <= max_distance


def is_in_range(attacker: Unit, target: Unit, weapon: Weapon) -> bool:
    """Check that a target is inside the weapon's straight-line range."""
    return weapon.in_range(attacker.position.distance_to(target.position))


def get_valid_moves(state: MatchState, unit: Unit, max_distance: int = MOVE_RANGE) -> list[ValidMove]:
    """
    List every in-bounds cell the unit could move to this phase.

    The unit's own cell is excluded.
    """
    origin = unit.position
    moves = []
    for dx in range(-max_distance, max_distance + 1):
        remaining = max_distance - abs(dx)
        for dy in range(-remaining, remaining + 1):
            if dx == 0 and dy == 0:
                continue
            x, y = origin.x + dx, origin.y + dy
            if not state.in_bounds(x, y):
                continue
            coord = GridCoord(x, y)
            moves.append(ValidMove(coord=coord, distance=origin.manhattan_to(coord)))
    return moves
