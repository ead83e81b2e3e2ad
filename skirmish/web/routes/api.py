"""API routes for AJAX operations."""

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from skirmish.generators import build_weapon_catalog
from skirmish.mechanics import get_valid_moves
from skirmish.models.customization import CustomizationConfig
from skirmish.models.enums import Phase, Side, WeaponType
from skirmish.models.grid import GridCoord
from ..registry import get_registry

api_bp = Blueprint("api", __name__)


def _not_found():
    return jsonify({"error": "Match not found"}), 404


def _bad_request(message: str, **extra):
    return jsonify({"error": message, **extra}), 400


def _json_object():
    """Parsed JSON body, or None when it is not a JSON object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def _action_response(entry, success: bool, since_id, **extra):
    """Standard body for an action: success flag, new log entries and a snapshot."""
    return jsonify({
        "success": success,
        "events": [e.to_dict() for e in entry.controller.get_events(since_id=since_id)],
        "state": entry.controller.get_match_state(),
        **extra,
    })


def _latest_event_id(entry):
    events = entry.state.events
    return events[-1].id if events else 0


@api_bp.route("/weapons", methods=["GET"])
def list_weapons():
    """Stock weapon catalog (before any customization)."""
    catalog = build_weapon_catalog()
    return jsonify({"weapons": [w.to_dict() for w in catalog.values()]})


@api_bp.route("/matches", methods=["POST"])
def create_match():
    """Start a new match.

    Body (all optional):
        seed: int - seed for reproducible rolls
        opponents: int - number of scripted opponents
        name: str - display name
    """
    data = _json_object()
    if data is None:
        return _bad_request("JSON object body required")
    config = current_app.config

    try:
        seed = data.get("seed", config["SEED"])
        seed = int(seed) if seed is not None else None
        opponents = int(data.get("opponents", config["OPPONENTS"]))
    except (TypeError, ValueError):
        return _bad_request("seed and opponents must be integers")

    entry = get_registry().create(
        opponent_count=opponents,
        seed=seed,
        grid_width=config["GRID_WIDTH"],
        grid_height=config["GRID_HEIGHT"],
        name=str(data.get("name", "Skirmish")),
    )
    current_app.logger.info("Created match %s with %d opponent(s)", entry.state.id, len(entry.state.opponents))
    return jsonify(entry.controller.get_match_state()), 201


@api_bp.route("/matches/<match_id>", methods=["GET"])
def get_match(match_id: str):
    """Get current match state (for polling)."""
    entry = get_registry().get(match_id)
    if entry is None:
        return _not_found()
    with entry.lock:
        return jsonify(entry.controller.get_match_state())


@api_bp.route("/matches/<match_id>", methods=["DELETE"])
def delete_match(match_id: str):
    """Discard a match."""
    if not get_registry().remove(match_id):
        return _not_found()
    return jsonify({"success": True})


@api_bp.route("/matches/<match_id>/select", methods=["POST"])
def select_unit(match_id: str):
    """Select a unit for movement. Body: {"unit_id": str}"""
    entry = get_registry().get(match_id)
    if entry is None:
        return _not_found()

    data = _json_object()
    if data is None:
        return _bad_request("JSON object body required")
    unit_id = data.get("unit_id")
    if not isinstance(unit_id, str):
        return _bad_request("unit_id is required")

    with entry.lock:
        since_id = _latest_event_id(entry)
        success = entry.controller.select_unit(unit_id)
        return _action_response(entry, success, since_id)


@api_bp.route("/matches/<match_id>/move/valid-destinations", methods=["GET"])
def valid_destinations(match_id: str):
    """Cells the selected unit may move to (empty when nothing is selected)."""
    entry = get_registry().get(match_id)
    if entry is None:
        return _not_found()

    with entry.lock:
        state = entry.state
        unit = state.selected_unit
        moves = []
        if unit is not None and state.phase is Phase.MOVEMENT and state.active_side is Side.PLAYER:
            moves = [m.to_dict() for m in get_valid_moves(state, unit)]
        return jsonify({
            "unit_id": unit.id if unit is not None else None,
            "destinations": moves,
        })


@api_bp.route("/matches/<match_id>/move", methods=["POST"])
def move_unit(match_id: str):
    """Move the selected unit. Body: {"x": int, "y": int}"""
    entry = get_registry().get(match_id)
    if entry is None:
        return _not_found()

    data = _json_object()
    if data is None:
        return _bad_request("JSON object body required")
    try:
        target = GridCoord(int(data["x"]), int(data["y"]))
    except (KeyError, TypeError, ValueError):
        return _bad_request("x and y must be integers")

    with entry.lock:
        since_id = _latest_event_id(entry)
        success = entry.controller.move_selected_unit(target)
        return _action_response(entry, success, since_id)


@api_bp.route("/matches/<match_id>/weapon", methods=["POST"])
def select_weapon(match_id: str):
    """Arm a weapon. Body: {"weapon_type": "laser" | "torpedo"}"""
    entry = get_registry().get(match_id)
    if entry is None:
        return _not_found()

    data = _json_object()
    if data is None:
        return _bad_request("JSON object body required")
    try:
        weapon_type = WeaponType(data.get("weapon_type"))
    except ValueError:
        return _bad_request("Unknown weapon type", valid=[w.value for w in WeaponType])

    with entry.lock:
        since_id = _latest_event_id(entry)
        success = entry.controller.select_weapon(weapon_type)
        return _action_response(entry, success, since_id)


@api_bp.route("/matches/<match_id>/fire", methods=["POST"])
def fire(match_id: str):
    """Fire the selected weapon. Body: {"target_id": str}"""
    entry = get_registry().get(match_id)
    if entry is None:
        return _not_found()

    data = _json_object()
    if data is None:
        return _bad_request("JSON object body required")
    target_id = data.get("target_id")
    if not isinstance(target_id, str):
        return _bad_request("target_id is required")

    with entry.lock:
        since_id = _latest_event_id(entry)
        outcome = entry.controller.fire_at(target_id)
        return _action_response(
            entry,
            outcome is not None,
            since_id,
            outcome=outcome.to_dict() if outcome is not None else None,
        )


@api_bp.route("/matches/<match_id>/resolve-critical", methods=["POST"])
def resolve_critical(match_id: str):
    """Confirm the critical phase."""
    entry = get_registry().get(match_id)
    if entry is None:
        return _not_found()

    with entry.lock:
        since_id = _latest_event_id(entry)
        success = entry.controller.resolve_critical()
        return _action_response(entry, success, since_id)


@api_bp.route("/matches/<match_id>/next-phase", methods=["POST"])
def next_phase(match_id: str):
    """End the current phase (runs the opponent's turn when control passes to it)."""
    entry = get_registry().get(match_id)
    if entry is None:
        return _not_found()

    with entry.lock:
        since_id = _latest_event_id(entry)
        success = entry.controller.advance_phase()
        return _action_response(entry, success, since_id)


@api_bp.route("/matches/<match_id>/customize", methods=["POST"])
def customize(match_id: str):
    """Apply a ship customization (validated CustomizationConfig body)."""
    entry = get_registry().get(match_id)
    if entry is None:
        return _not_found()

    data = _json_object()
    if data is None:
        return _bad_request("JSON object body required")
    try:
        config = CustomizationConfig.model_validate(data)
    except ValidationError as e:
        return _bad_request("Invalid customization", details=e.errors(include_url=False, include_context=False))

    with entry.lock:
        since_id = _latest_event_id(entry)
        success = entry.controller.apply_customization(config)
        return _action_response(entry, success, since_id)


@api_bp.route("/matches/<match_id>/combat-log", methods=["GET"])
def get_combat_log(match_id: str):
    """Get the combat log for a match.

    Query params:
        since_id: int - Only return log entries after this ID (for polling)
        limit: int - Maximum number of entries to return (default 50)

    Returns:
        JSON with log entries, oldest first
    """
    since_id = request.args.get("since_id", type=int)
    limit = request.args.get("limit", default=50, type=int)

    entry = get_registry().get(match_id)
    if entry is None:
        return _not_found()

    with entry.lock:
        events = entry.controller.get_events(since_id=since_id, limit=limit)
        return jsonify({
            "log": [e.to_dict() for e in events],
            "count": len(events),
            "latest_id": events[-1].id if events else None,
        })
