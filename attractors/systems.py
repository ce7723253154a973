"""Chaotic dynamical systems described by three coupled ODEs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from attractors.state import State


@dataclass
class DynamicalSystem(ABC):
    """A system of three first-order ODEs with an initial state."""

    initial_state: State = State(1.0, 1.0, 1.0)

    @abstractmethod
    def equation(self, state: State) -> State:
        """Return the derivative (dx, dy, dz) at ``state``."""


@dataclass
class LorenzSystem(DynamicalSystem):
    """The Lorenz attractor."""

    initial_state: State = State(1.0, 1.0, 1.0)
    sigma: float = 10.0
    rho: float = 28.0
    beta: float = 8.0 / 3.0

    def equation(self, state: State) -> State:
        return State(
            self.sigma * (state.y - state.x),
            state.x * (self.rho - state.z) - state.y,
            state.x * state.y - self.beta * state.z,
        )


@dataclass
class FourWingSystem(DynamicalSystem):
    """The four-wing attractor."""

    initial_state: State = State(1.3, -0.18, 0.01)
    a: float = 0.2
    b: float = 0.01
    c: float = -0.4

    def equation(self, state: State) -> State:
        return State(
            self.a * state.x + state.y * state.z,
            self.b * state.x + self.c * state.y - state.x * state.z,
            -state.z - state.x * state.y,
        )


@dataclass
class HalvorsenSystem(DynamicalSystem):
    """The cyclically symmetric Halvorsen attractor."""

    initial_state: State = State(-1.48, -1.51, 2.04)
    a: float = 1.89

    def equation(self, state: State) -> State:
        a = self.a
        return State(
            -a * state.x - 4 * state.y - 4 * state.z - state.y * state.y,
            -a * state.y - 4 * state.z - 4 * state.x - state.z * state.z,
            -a * state.z - 4 * state.x - 4 * state.y - state.x * state.x,
        )


@dataclass
class RosslerSystem(DynamicalSystem):
    """The Rössler attractor."""

    initial_state: State = State(10.0, 0.0, 10.0)
    a: float = 0.2
    b: float = 0.2
    c: float = 5.7

    def equation(self, state: State) -> State:
        return State(
            -(state.y + state.z),
            state.x + self.a * state.y,
            self.b + state.z * (state.x - self.c),
        )


@dataclass
class ChenSystem(DynamicalSystem):
    """The Chen attractor."""

    initial_state: State = State(5.0, 10.0, 10.0)
    alpha: float = 5.0
    beta: float = -10.0
    delta: float = -0.38

    def equation(self, state: State) -> State:
        return State(
            self.alpha * state.x - state.y * state.z,
            self.beta * state.y + state.x * state.z,
            self.delta * state.z + state.x * state.y / 3,
        )


@dataclass
class SprottSystem(DynamicalSystem):
    """The Sprott attractor."""

    initial_state: State = State(0.63, 0.47, -0.54)
    a: float = 2.07
    b: float = 1.79

    def equation(self, state: State) -> State:
        return State(
            state.y + self.a * state.x * state.y + state.x * state.z,
            1 - self.b * state.x * state.x + state.y * state.z,
            state.x - state.x * state.x - state.y * state.y,
        )