"""Runtime configuration, read from SKIRMISH_* environment variables."""

import os


def _env_int(name: str, default):
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    return int(value)


class Config:
    """Default Flask/app settings. Loaded with ``app.config.from_object``."""
    SECRET_KEY = os.environ.get("SKIRMISH_SECRET_KEY", "skirmish-dev-key")
    LOG_LEVEL = os.environ.get("SKIRMISH_LOG_LEVEL", "INFO")

    HOST = os.environ.get("SKIRMISH_HOST", "127.0.0.1")
    PORT = _env_int("SKIRMISH_PORT", 5001)

    # Match defaults
    GRID_WIDTH = _env_int("SKIRMISH_GRID_WIDTH", 16)
    GRID_HEIGHT = _env_int("SKIRMISH_GRID_HEIGHT", 12)
    OPPONENTS = _env_int("SKIRMISH_OPPONENTS", 2)
    # Matches kept in memory before the oldest are evicted
    MAX_MATCHES = _env_int("SKIRMISH_MAX_MATCHES", 100)
    # Fixed seed makes every new match replay the same rolls
    SEED = _env_int("SKIRMISH_SEED", None)
