"""
Pytest fixtures for Void Skirmish testing.

Provides a scripted random source, sample units and matches, and a Flask
test client with helpers for the match API.
"""

import pytest

from skirmish.generators import generate_match
from skirmish.mechanics import MatchController
from skirmish.models import GridCoord, Unit, Weapon, WeaponType
from skirmish.web.app import create_app


# ============== RANDOM SOURCE ==============

class ScriptedRandom:
    """Random source that replays queued values.

    ``random()`` pops from ``draws`` (0.99 once empty, so no criticals),
    ``choice(seq)`` pops from ``choices`` (first element once empty).
    """

    def __init__(self, draws=None, choices=None):
        self.draws = list(draws or [])
        self.choices = list(choices or [])
        self.draw_count = 0

    def set_draws(self, draws):
        self.draws = list(draws)

    def set_choices(self, choices):
        self.choices = list(choices)

    def random(self):
        self.draw_count += 1
        if self.draws:
            return self.draws.pop(0)
        return 0.99

    def choice(self, seq):
        if self.choices:
            return self.choices.pop(0)
        return seq[0]


@pytest.fixture
def rng():
    """Scripted random source that never crits unless told to."""
    return ScriptedRandom()


# ============== MODEL FIXTURES ==============

@pytest.fixture
def make_unit():
    """Factory for units with explicit stats."""
    def _make(unit_id="target", x=0, y=0, player=False, **kwargs):
        return Unit(id=unit_id, position=GridCoord(x, y), is_player_controlled=player, **kwargs)

    return _make


@pytest.fixture
def laser():
    """Stock laser: 10 damage, range 8, 10% crit."""
    return Weapon(weapon_type=WeaponType.LASER, damage=10, range=8, crit_chance=0.1, label="Macro batteries")


@pytest.fixture
def match_state():
    """Fresh two-opponent match: player at (5,5), opponents at (2,2) and (8,2)."""
    return generate_match()


@pytest.fixture
def controller(match_state, rng):
    """Controller over the sample match with the scripted random source."""
    return MatchController(match_state, rng=rng)


# ============== WEB FIXTURES ==============

@pytest.fixture(scope="function")
def app():
    """Create a Flask app configured for testing."""
    flask_app = create_app({"TESTING": True, "SEED": 7, "OPPONENTS": 2})
    yield flask_app


@pytest.fixture(scope="function")
def client(app):
    """Create a test client for the Flask app."""
    return app.test_client()


@pytest.fixture
def create_match(client):
    """Helper function to create a match via API. Returns the match id."""
    def _create(**body):
        response = client.post("/api/matches", json=body)
        assert response.status_code == 201
        return response.get_json()["id"]

    return _create


@pytest.fixture
def post_action(client):
    """Helper function to post a match action via API."""
    def _post(match_id, action, **body):
        return client.post(f"/api/matches/{match_id}/{action}", json=body)

    return _post


@pytest.fixture
def get_state(client):
    """Helper function to fetch a match snapshot via API."""
    def _get(match_id):
        response = client.get(f"/api/matches/{match_id}")
        assert response.status_code == 200
        return response.get_json()

    return _get
