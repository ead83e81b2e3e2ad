"""In-memory match registry for the web app.

Matches only live as long as the server process; nothing is persisted.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from flask import current_app

from skirmish.generators import generate_match
from skirmish.mechanics import MatchController, make_rng

EXTENSION_KEY = "skirmish.matches"

logger = logging.getLogger(__name__)


@dataclass
class MatchEntry:
    """A running match plus the lock serializing requests against it."""
    controller: MatchController
    lock: threading.Lock = field(default_factory=threading.Lock)

    @property
    def state(self):
        return self.controller.state


class MatchRegistry:
    """Holds every active match, keyed by match id.

    Creating a match first evicts finished matches, then the oldest ones
    while the registry is at ``max_matches``.
    """

    def __init__(self, max_matches: int = 100):
        self._matches: dict[str, MatchEntry] = {}
        self._lock = threading.Lock()
        self.max_matches = max(1, max_matches)

    def create(
        self,
        opponent_count: int = 2,
        seed: Optional[int] = None,
        grid_width: int = 16,
        grid_height: int = 12,
        name: str = "Skirmish",
    ) -> MatchEntry:
        """Start a new match and register it."""
        state = generate_match(
            opponent_count=opponent_count,
            name=name,
            grid_width=grid_width,
            grid_height=grid_height,
        )
        entry = MatchEntry(controller=MatchController(state, rng=make_rng(seed)))
        with self._lock:
            self._evict()
            self._matches[state.id] = entry
        return entry

    def _evict(self) -> None:
        # Caller holds self._lock
        for match_id, entry in list(self._matches.items()):
            with entry.lock:
                finished = entry.state.is_over()
            if finished:
                del self._matches[match_id]
                logger.info("Evicted finished match %s", match_id)

        # Insertion order: oldest first
        while len(self._matches) >= self.max_matches:
            match_id = next(iter(self._matches))
            del self._matches[match_id]
            logger.warning("Match limit %d reached, evicted match %s", self.max_matches, match_id)

    def get(self, match_id: str) -> Optional[MatchEntry]:
        with self._lock:
            return self._matches.get(match_id)

    def remove(self, match_id: str) -> bool:
        """Discard a match. Returns True if it existed."""
        with self._lock:
            return self._matches.pop(match_id, None) is not None

    def all(self) -> list[MatchEntry]:
        with self._lock:
            return list(self._matches.values())


def get_registry() -> MatchRegistry:
    """Registry attached to the current Flask app."""
    return current_app.extensions[EXTENSION_KEY]
