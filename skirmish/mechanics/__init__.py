"""Game mechanics for Void Skirmish."""

from .dice import make_rng, roll_critical
from .combat import resolve_attack
from .movement import MOVE_RANGE, is_valid_move, is_in_range, get_valid_moves
from .opponent import run_opponent_turn
from .turns import MatchController

__all__ = [
    "make_rng",
    "roll_critical",
    "resolve_attack",
    "MOVE_RANGE",
    "is_valid_move",
    "is_in_range",
    "get_valid_moves",
    "run_opponent_turn",
    "MatchController",
]
