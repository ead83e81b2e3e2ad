"""Main routes for the web application."""

from flask import Blueprint, jsonify

from skirmish.version import __version__
from ..registry import get_registry

main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def index():
    """Home page - list active matches."""
    matches = []
    for entry in get_registry().all():
        with entry.lock:
            state = entry.state
            winner = state.winner()
            matches.append({
                "id": state.id,
                "name": state.name,
                "round": state.round,
                "phase": state.phase.value,
                "opponents_remaining": len(state.opponents),
                "is_over": state.is_over(),
                "winner": winner.value if winner else None,
                "created_at": state.created_at.isoformat(),
            })
    return jsonify({"version": __version__, "matches": matches})
