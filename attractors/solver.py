"""Fixed-step numerical integration of dynamical systems."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from attractors.exporter import Exporter
from attractors.state import State
from attractors.systems import DynamicalSystem

_Step = Callable[[DynamicalSystem, State, float], State]


def _euler_step(system: DynamicalSystem, current: State, h: float) -> State:
    return current + system.equation(current).scaled(h)


def _rk4_step(system: DynamicalSystem, current: State, h: float) -> State:
    k1 = system.equation(current)
    k2 = system.equation(current + k1.scaled(0.5 * h))
    k3 = system.equation(current + k2.scaled(0.5 * h))
    k4 = system.equation(current + k3.scaled(h))
    return State(
        current.x + (k1.x + 2 * k2.x + 2 * k3.x + k4.x) * h / 6,
        current.y + (k1.y + 2 * k2.y + 2 * k3.y + k4.y) * h / 6,
        current.z + (k1.z + 2 * k2.z + 2 * k3.z + k4.z) * h / 6,
    )


def _integrate(
    system: DynamicalSystem, h: float, start_time: float, end_time: float, step: _Step
) -> Iterator[State]:
    if h <= 0:
        raise ValueError("step size must be positive")
    current = system.initial_state
    t = start_time
    while t <= end_time:
        following = step(system, current, h)
        yield current
        current = following
        t += h
    yield current


def euler_steps(
    system: DynamicalSystem, h: float, start_time: float, end_time: float
) -> Iterator[State]:
    """Yield the trajectory computed with the explicit Euler method."""
    return _integrate(system, h, start_time, end_time, _euler_step)


def rk4_steps(
    system: DynamicalSystem, h: float, start_time: float, end_time: float
) -> Iterator[State]:
    """Yield the trajectory computed with the classical fourth-order Runge-Kutta method."""
    return _integrate(system, h, start_time, end_time, _rk4_step)


@dataclass
class Solver:
    """Integrates a system and writes its trajectory to a CSV file."""

    system: DynamicalSystem
    h: float = 0.01
    start_time: float = 0.0
    end_time: float = 50.0
    file_name: str = "output"
    directory: str | os.PathLike[str] = "output"

    def _run(self, states: Iterator[State]) -> Path:
        with Exporter(self.file_name, self.directory) as exporter:
            for state in states:
                exporter.add_state(state)
        return exporter.path

    def euler(self) -> Path:
        """Integrate with the Euler method; return the path written."""
        return self._run(euler_steps(self.system, self.h, self.start_time, self.end_time))

    def rk4(self) -> Path:
        """Integrate with fourth-order Runge-Kutta; return the path written."""
        return self._run(rk4_steps(self.system, self.h, self.start_time, self.end_time))