"""Random draws used by combat resolution.

Any object with ``random()`` and ``choice(seq)`` methods can act as the
random source: the ``random`` module itself, a seeded ``random.Random``,
or a scripted stand-in in tests.
"""

import random
from typing import Optional


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create a random source, reproducible when a seed is given."""
    return random.Random(seed)


def draw(rng=None) -> float:
    """Draw a uniform value in [0, 1)."""
    return (rng or random).random()


def roll_critical(crit_chance: float, rng=None) -> bool:
    """
    Roll for a critical hit.

    Args:
        crit_chance: Probability of a critical (0 to 1)
        rng: Random source (defaults to the ``random`` module)

    Returns:
        True if the draw lands under the critical chance
    """
    return draw(rng) < crit_chance
