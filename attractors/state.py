"""Points and derivatives in three-dimensional phase space."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class State:
    """A point (or a derivative vector) in 3-D phase space."""

    x: float
    y: float
    z: float

    def __add__(self, other: State) -> State:
        if not isinstance(other, State):
            return NotImplemented
        return State(self.x + other.x, self.y + other.y, self.z + other.z)

    def scaled(self, factor: float) -> State:
        """Return this vector multiplied by ``factor``."""
        return State(self.x * factor, self.y * factor, self.z * factor)