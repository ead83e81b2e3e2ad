"""Reference data for match setup."""

# Base stats per weapon archetype (keyed by WeaponType value).
# Laser and torpedo are the player's stock armament.
WEAPON_TEMPLATES = {
    "laser": {
        "label": "Macro batteries", "damage": 10, "speed": 6, "range": 8,
        "crit_chance": 0.1,
        "ready_message": "Macro batteries armed and ready.",
    },
    "torpedo": {
        "label": "Torpedo", "damage": 25, "speed": 4, "range": 12,
        "crit_chance": 0.2,
        "ready_message": "Torpedo tubes loaded and ready to fire.",
    },
    "plasma": {
        "label": "Plasma lance", "damage": 18, "speed": 5, "range": 6,
        "crit_chance": 0.15, "area_effect": 1,
        "ready_message": "Plasma lance charged.",
    },
    "railgun": {
        "label": "Railgun", "damage": 30, "speed": 12, "range": 14,
        "crit_chance": 0.05, "accuracy": 1.2,
        "ready_message": "Railgun capacitors at full charge.",
    },
    "missile": {
        "label": "Missile battery", "damage": 15, "speed": 3, "range": 10,
        "crit_chance": 0.1, "accuracy": 0.9, "area_effect": 2,
        "ready_message": "Missile battery locked and loaded.",
    },
}

# Stock armament slots for ships
PRIMARY_WEAPON = "laser"
SECONDARY_WEAPON = "torpedo"

# Opening positions in grid cells; opponents are taken in order
PLAYER_START = (5, 5)
OPPONENT_STARTS = [(2, 2), (8, 2), (2, 8), (8, 8), (5, 1), (1, 5)]

DEFAULT_GRID_WIDTH = 16
DEFAULT_GRID_HEIGHT = 12

OPPONENT_NAMES = [
    "Corsair", "Marauder", "Reaver", "Jackal", "Wraith", "Harrier",
    "Vulture", "Specter", "Raptor", "Viper",
]
