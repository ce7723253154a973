# attractors

An interactive solver for strange attractors. It integrates one of six
three-dimensional chaotic systems with the explicit Euler method or the
classical fourth-order Runge–Kutta method and writes the trajectory to a CSV
file.

Supported systems, as classes in `attractors.systems`:

1. Lorenz (`LorenzSystem`: `sigma`, `rho`, `beta`)
2. Four Wing (`FourWingSystem`: `a`, `b`, `c`)
3. Halvorsen (`HalvorsenSystem`: `a`)
4. Rossler (`RosslerSystem`: `a`, `b`, `c`)
5. Chen (`ChenSystem`: `alpha`, `beta`, `delta`)
6. Sprott (`SprottSystem`: `a`, `b`)

Each system has default parameters and a default `initial_state`; both can be
overridden.

## Installation

```
pip install .
```

## Command line

```
attractors [--directory DIR]
```

The program asks, in order:

- which attractor to solve (1–6);
- whether to use its defaults or custom values. Custom parameters must all be
  positive; then an initial state `x y z` is asked for;
- the numerical method: 1 for Euler, 2 for Runge–Kutta 4th order;
- default or custom time settings. The default is a step size of `0.01` from
  time `0` to `200`. Custom values are `step start end`, each greater than
  zero, with start before end;
- an output file name, without extension.

Invalid answers are asked again. The trajectory is written to
`<DIR>/<name>.csv`, where `DIR` defaults to `output` and is created if
missing. If input ends before all answers are given, the program exits with
status 1.

## CSV format

The file starts with the header `x,y,z`, followed by one row per state,
beginning with the initial state. Numbers are written with six significant
digits (Python's `g` format, see `attractors.exporter.format_number`).

## Library use

```python
from attractors.solver import Solver, rk4_steps
from attractors.state import State
from attractors.systems import LorenzSystem

system = LorenzSystem(State(1.0, 1.0, 1.0), sigma=10.0, rho=28.0, beta=8.0 / 3.0)
for state in rk4_steps(system, 0.01, 0.0, 1.0):
    print(state.x, state.y, state.z)

path = Solver(system, 0.01, 0.0, 50.0, "lorenz", "output").rk4()
```

`euler_steps` and `rk4_steps` are generators that yield the initial state,
then one state per step while the time (advanced by `h` from `start_time`) is
at most `end_time`, then one final state. A step size that is not positive
raises `ValueError`.

`Solver.euler()` and `Solver.rk4()` write those states through an
`attractors.exporter.Exporter` and return the path of the file written. Unlike
the command line, `Solver` and `Exporter` do not create the output directory;
it must already exist. `Exporter` can also be used directly as a context
manager, calling `add_state` for each `State`.

## What it does not do

The package only computes trajectories and writes them as CSV. It does not
plot or display attractors; use a separate tool to visualise the output.

## Tests

```
pip install .[test]
pytest
```