"""Square grid coordinates for the tactical map."""

import math
from dataclasses import dataclass


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class GridCoord:
    """A cell on the tactical grid.

    x grows to the right, y grows downward (screen orientation).
    """
    x: int = 0
    y: int = 0

    def manhattan_to(self, other: "GridCoord") -> int:
        """Number of orthogonal steps to another cell."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def distance_to(self, other: "GridCoord") -> float:
        """Straight-line distance to another cell, in cells."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def step_toward(self, other: "GridCoord") -> "GridCoord":
        """Move one cell toward another along the sign of each axis.

        Both axes step independently, so the result is diagonal whenever
        the target differs on both axes.
        """
        return GridCoord(
            self.x + _sign(other.x - self.x),
            self.y + _sign(other.y - self.y),
        )

    def bearing_to(self, other: "GridCoord") -> float:
        """Angle in radians from this cell toward another."""
        return math.atan2(other.y - self.y, other.x - self.x)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "GridCoord":
        """Create from dictionary."""
        return cls(x=int(data.get("x", 0)), y=int(data.get("y", 0)))
