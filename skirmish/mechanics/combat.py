"""Attack resolution: shields, hull, armor and critical effects."""

import logging

from skirmish.models.enums import LogKind, OutcomeKind, Side
from skirmish.models.match import AttackOutcome, MatchState
from skirmish.models.unit import CRITICAL_EFFECT_MESSAGES, Unit
from skirmish.models.weapon import Weapon

from .dice import roll_critical

logger = logging.getLogger(__name__)


def _owner_label(unit: Unit) -> str:
    return "your" if unit.side is Side.PLAYER else "enemy"


def resolve_attack(
    state: MatchState,
    attacker: Unit,
    target: Unit,
    weapon: Weapon,
    rng=None,
) -> AttackOutcome:
    """
    Resolve one weapon hit against a target.

    Range is not checked here; callers only invoke this for legal targets.
    The target is mutated in place and, if destroyed, removed from play.

    Args:
        state: The match the units belong to (receives log entries)
        attacker: Firing unit
        target: Unit being hit
        weapon: Weapon archetype used for the shot
        rng: Random source for the critical roll and system choice

    Returns:
        AttackOutcome describing what the hit did
    """
    old_shield = target.shield
    old_hull = target.hull
    old_shield_percent = target.shield_percent
    old_hull_percent = target.hull_percent

    target.apply_damage(weapon.damage)

    critical = roll_critical(weapon.crit_chance, rng)
    critical_system = None
    if critical:
        state.log(LogKind.CRITICAL, f"Critical hit by {weapon.weapon_type.value}! Systems may be impaired.")
        critical_system = target.apply_critical_effect(rng)
        state.log(LogKind.CRITICAL, CRITICAL_EFFECT_MESSAGES[critical_system])

    owner = _owner_label(target)
    if old_shield > 0 and target.shield < old_shield:
        kind = OutcomeKind.SHIELD_HIT
        before, after = old_shield, target.shield
        before_percent, after_percent = old_shield_percent, target.shield_percent
        state.log(
            LogKind.SHIELD,
            f"{weapon.name} hit {owner} shields! "
            f"Shield reduced from {before_percent:.0f}% to {after_percent:.0f}%.",
        )
    else:
        kind = OutcomeKind.HULL_HIT
        before, after = old_hull, target.hull
        before_percent, after_percent = old_hull_percent, target.hull_percent
        state.log(
            LogKind.HIT,
            f"Direct hit on {owner} hull! "
            f"Hull integrity reduced from {before_percent:.0f}% to {after_percent:.0f}%.",
        )

    destroyed = target.is_destroyed()
    if destroyed:
        state.remove_unit(target)
        if target.side is Side.PLAYER:
            state.log(LogKind.HIT, "Your vessel has been destroyed!")
        else:
            state.log(LogKind.HIT, "Enemy vessel destroyed!")

    logger.info(
        "%s -> %s with %s: %s %.0f -> %.0f%s%s",
        attacker.id, target.id, weapon.weapon_type.value, kind.value, before, after,
        " (critical)" if critical else "", " (destroyed)" if destroyed else "",
    )

    return AttackOutcome(
        attacker_id=attacker.id,
        target_id=target.id,
        weapon_type=weapon.weapon_type,
        kind=kind,
        before=before,
        after=after,
        before_percent=before_percent,
        after_percent=after_percent,
        critical=critical,
        critical_system=critical_system,
        destroyed=destroyed,
    )
