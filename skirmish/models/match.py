"""Match state, turn tracking and combat log models."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .enums import PHASE_ORDER, LogKind, OutcomeKind, Phase, Side, SystemType, WeaponType
from .unit import Unit
from .weapon import Weapon


@dataclass
class TurnTracker:
    """Cycles through the phases of a turn and alternates sides.

    Wrapping back to the first phase hands the turn to the other side;
    a wrap that returns control to the player starts a new round.
    """
    phases: list = field(default_factory=lambda: list(PHASE_ORDER))
    phase_index: int = 0
    active_side: Side = Side.PLAYER
    round: int = 1

    @property
    def phase(self) -> Phase:
        return self.phases[self.phase_index]

    def advance(self) -> bool:
        """Move to the next phase. Returns True if the active side changed."""
        self.phase_index = (self.phase_index + 1) % len(self.phases)
        if self.phase_index != 0:
            return False

        self.active_side = self.active_side.other
        if self.active_side is Side.PLAYER:
            self.round += 1
        return True

    def to_dict(self) -> dict:
        return {
            "phase": self.phase.value,
            "phases": [p.value for p in self.phases],
            "active_side": self.active_side.value,
            "round": self.round,
        }


@dataclass
class CombatEvent:
    """A single narrated entry in the combat log."""
    id: int
    round: int
    side: Side
    kind: LogKind
    message: str
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "round": self.round,
            "side": self.side.value,
            "kind": self.kind.value,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class AttackOutcome:
    """Result of a resolved attack.

    ``before``/``after`` are shield values for a shield hit and hull values
    for a hull hit; the percentages are relative to the matching maximum.
    """
    attacker_id: str
    target_id: str
    weapon_type: WeaponType
    kind: OutcomeKind
    before: float
    after: float
    before_percent: float
    after_percent: float
    critical: bool = False
    critical_system: Optional[SystemType] = None
    destroyed: bool = False

    def to_dict(self) -> dict:
        return {
            "attacker_id": self.attacker_id,
            "target_id": self.target_id,
            "weapon_type": self.weapon_type.value,
            "kind": self.kind.value,
            "before": self.before,
            "after": self.after,
            "before_percent": self.before_percent,
            "after_percent": self.after_percent,
            "critical": self.critical,
            "critical_system": self.critical_system.value if self.critical_system else None,
            "destroyed": self.destroyed,
        }


@dataclass
class MatchState:
    """Everything about one engagement: units, weapons, turn and log."""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    name: str = "Skirmish"

    # Player unit is None once destroyed
    player: Optional[Unit] = None
    opponents: list[Unit] = field(default_factory=list)

    # Weapon catalog for this match
    weapons: dict = field(default_factory=dict)  # WeaponType -> Weapon
    primary_weapon: WeaponType = WeaponType.LASER
    secondary_weapon: WeaponType = WeaponType.TORPEDO
    selected_weapon: WeaponType = WeaponType.LASER
    default_weapon: WeaponType = WeaponType.LASER  # Used by the scripted opponent

    turn: TurnTracker = field(default_factory=TurnTracker)
    selected_unit_id: Optional[str] = None

    grid_width: int = 16
    grid_height: int = 12

    events: list[CombatEvent] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def phase(self) -> Phase:
        return self.turn.phase

    @property
    def active_side(self) -> Side:
        return self.turn.active_side

    @property
    def round(self) -> int:
        return self.turn.round

    @property
    def selected_unit(self) -> Optional[Unit]:
        if self.selected_unit_id is None:
            return None
        return self.get_unit(self.selected_unit_id)

    def living_units(self) -> list[Unit]:
        """All units still in play, player first."""
        units = [self.player] if self.player is not None else []
        return units + list(self.opponents)

    def get_unit(self, unit_id: str) -> Optional[Unit]:
        """Find a living unit by id."""
        for unit in self.living_units():
            if unit.id == unit_id:
                return unit
        return None

    def get_weapon(self, weapon_type: WeaponType) -> Optional[Weapon]:
        return self.weapons.get(weapon_type)

    @property
    def player_armament(self) -> list[WeaponType]:
        return [self.primary_weapon, self.secondary_weapon]

    def remove_unit(self, unit: Unit) -> None:
        """Take a destroyed unit out of its side's collection."""
        if unit is self.player:
            self.player = None
        else:
            self.opponents = [u for u in self.opponents if u is not unit]
        if self.selected_unit_id == unit.id:
            self.selected_unit_id = None

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.grid_width and 0 <= y < self.grid_height

    def all_opponents_destroyed(self) -> bool:
        return not self.opponents

    def player_destroyed(self) -> bool:
        return self.player is None

    def is_over(self) -> bool:
        return self.all_opponents_destroyed() or self.player_destroyed()

    def winner(self) -> Optional[Side]:
        """Winning side, or None while the match is still running."""
        if self.player_destroyed():
            return Side.OPPONENT
        if self.all_opponents_destroyed():
            return Side.PLAYER
        return None

    def log(self, kind: LogKind, message: str) -> CombatEvent:
        """Append an entry to the combat log."""
        event = CombatEvent(
            id=len(self.events) + 1,
            round=self.round,
            side=self.active_side,
            kind=kind,
            message=message,
        )
        self.events.append(event)
        return event

    def to_dict(self) -> dict:
        """Read-only snapshot for rendering."""
        winner = self.winner()
        return {
            "id": self.id,
            "name": self.name,
            **self.turn.to_dict(),
            "selected_unit_id": self.selected_unit_id,
            "selected_weapon": self.selected_weapon.value,
            "player_armament": [wt.value for wt in self.player_armament],
            "grid": {"width": self.grid_width, "height": self.grid_height},
            "player": self.player.to_dict() if self.player is not None else None,
            "opponents": [u.to_dict() for u in self.opponents],
            "weapons": {wt.value: w.to_dict() for wt, w in self.weapons.items()},
            "is_over": self.is_over(),
            "winner": winner.value if winner else None,
            "latest_event_id": self.events[-1].id if self.events else None,
        }
