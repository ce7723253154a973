"""Interactive command line for integrating strange attractors."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from attractors.solver import Solver
from attractors.state import State
from attractors.systems import (
    ChenSystem,
    DynamicalSystem,
    FourWingSystem,
    HalvorsenSystem,
    LorenzSystem,
    RosslerSystem,
    SprottSystem,
)

DEFAULT_TIMES = (0.01, 0.0, 200.0)

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_SYSTEM_MENU = (
    "\nPlease select one of the following attractors: \n"
    "\t 1. Lorenz Attractor \n\t 2. Four Wing Attractor \n\t 3. "
    "Halvorsen Attractor \n\t 4. Rossler Attractor \n\t 5. Chen "
    "Attractor \n\t 6. Sprott Attractor\n"
)
_INITIAL_PROMPT = "\nEnter initial conditions separated by a space \n\t (x y z): "
_EXACTLY_THREE = "Please follow the correct format (exactly 3 numbers).\n"
_INVALID_THREE = "Invalid input. Please enter three numbers separated by spaces.\n"
_NOT_POSITIVE = "All parameters must be positive.\n"


class _ExtraInput(ValueError):
    """Raised when a line holds more than the expected numbers."""


class Console:
    """Line-oriented prompts over a pair of text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def _in(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write ``text`` to the output stream."""
        self._out.write(text)
        self._out.flush()

    def prompt(self, text: str) -> str:
        """Show ``text`` and return the next input line without its line ending."""
        self.write(text)
        line = self._in.readline()
        if not line:
            raise EOFError("input ended")
        return line.rstrip("\r\n")


def parse_numbers(text: str, count: int) -> tuple[float, ...]:
    """Read exactly ``count`` whitespace-separated numbers from ``text``.

    Raises ValueError if fewer numbers can be read, or if anything follows them.
    """
    values: list[float] = []
    pos = 0
    for _ in range(count):
        match = _NUMBER.match(text, pos)
        if match is None:
            raise ValueError(f"expected {count} numbers in {text!r}")
        values.append(float(match.group(1)))
        pos = match.end()
    if text[pos:].strip():
        raise _ExtraInput(f"unexpected text after {count} numbers: {text[pos:]!r}")
    return tuple(values)


def _read_values(
    console: Console,
    prompt: str,
    count: int,
    extra_message: str,
    invalid_message: str,
    validate: Callable[[tuple[float, ...]], str | None] | None = None,
) -> tuple[float, ...]:
    while True:
        try:
            values = parse_numbers(console.prompt(prompt), count)
        except _ExtraInput:
            console.write(extra_message)
            continue
        except ValueError:
            console.write(invalid_message)
            continue
        problem = validate(values) if validate is not None else None
        if problem is None:
            return values
        console.write(problem)


def _all_positive(values: tuple[float, ...]) -> str | None:
    return None if all(v > 0 for v in values) else _NOT_POSITIVE


def _ask_single_digit(console: Console, header: str, menu: str, prompt: str, valid: range) -> int:
    while True:
        console.write(header)
        console.write(menu)
        choice = console.prompt(prompt)
        if len(choice) == 1 and choice in "0123456789" and int(choice) in valid:
            return int(choice)


def ask_system_choice(console: Console) -> int:
    """Ask which attractor to integrate; return its number from 1 to 6."""
    while True:
        console.write(_SYSTEM_MENU)
        choice = console.prompt("Choice (select the number of the attractor): ")
        if len(choice) == 1 and choice in "0123456789" and 1 <= int(choice) <= 6:
            return int(choice)


def _ask_default(console: Console, subject: str) -> int:
    return _ask_single_digit(
        console,
        f"\nPlease select default or custom {subject}: \n",
        "\t 1. Default \n\t 2. Custom\n",
        "Choice (select the number of the choice): ",
        range(1, 3),
    )


def ask_default_choice(console: Console) -> int:
    """Ask whether to use the default attractor (1) or a custom one (2)."""
    return _ask_default(console, "ATTRACTOR")


@dataclass(frozen=True)
class _SystemSpec:
    factory: Callable[..., DynamicalSystem]
    prompt: str
    count: int
    extra_message: str
    invalid_message: str


def _parameters_prompt(names: str) -> str:
    return f"\nEnter value for parameters separated by a space \n\t ({names}): "


_SYSTEMS: dict[int, _SystemSpec] = {
    1: _SystemSpec(LorenzSystem, _parameters_prompt("sigma rho beta"), 3, _EXACTLY_THREE, _INVALID_THREE),
    2: _SystemSpec(FourWingSystem, _parameters_prompt("a b c"), 3, _EXACTLY_THREE, _INVALID_THREE),
    3: _SystemSpec(
        HalvorsenSystem,
        "\nEnter value for parameter \n\t (a): ",
        1,
        "Please follow the correct format.\n",
        "Invalid input. \n",
    ),
    4: _SystemSpec(RosslerSystem, _parameters_prompt("a b c"), 3, _EXACTLY_THREE, _INVALID_THREE),
    5: _SystemSpec(ChenSystem, _parameters_prompt("alpha beta delta"), 3, _EXACTLY_THREE, _INVALID_THREE),
    6: _SystemSpec(
        SprottSystem,
        _parameters_prompt("a b"),
        2,
        "Please follow the correct format (exactly 2 numbers).\n",
        _INVALID_THREE,
    ),
}


def ask_system(choice: int, console: Console) -> DynamicalSystem:
    """Build the attractor numbered ``choice``, asking for custom values if wanted."""
    try:
        spec = _SYSTEMS[choice]
    except KeyError:
        raise ValueError(f"no attractor numbered {choice}") from None
    if ask_default_choice(console) == 1:
        return spec.factory()
    parameters = _read_values(
        console, spec.prompt, spec.count, spec.extra_message, spec.invalid_message, _all_positive
    )
    x, y, z = _read_values(console, _INITIAL_PROMPT, 3, _EXACTLY_THREE, _INVALID_THREE)
    return spec.factory(State(x, y, z), *parameters)


def ask_method(console: Console) -> int:
    """Ask for the integration method: 1 for Euler, 2 for fourth-order Runge-Kutta."""
    return _ask_single_digit(
        console,
        "\nPlease select numerical method: \n",
        "\t 1. Euler \n\t 2. Runge Kutta 4th order\n",
        "Choice (select the number of the choice): ",
        range(1, 3),
    )


def _valid_times(values: tuple[float, ...]) -> str | None:
    h, start, end = values
    if not (h > 0 and start > 0 and end > 0):
        return _NOT_POSITIVE
    if not start < end:
        return "Must be start time < end time."
    return None


def ask_times(console: Console) -> tuple[float, float, float]:
    """Ask for (step size, start time, end time), defaulting to DEFAULT_TIMES."""
    if _ask_default(console, "NUMERICAL METHOD") == 1:
        return DEFAULT_TIMES
    h, start, end = _read_values(
        console,
        "\nEnter values for the size step (the smaller the more "
        "presice, 0.1 or lower recommended), the start and end times \n\t "
        "(size-step start-time end-time): ",
        3,
        _EXACTLY_THREE,
        _INVALID_THREE,
        _valid_times,
    )
    return h, start, end


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive solver; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="attractors", description="Integrate a strange attractor and write it to CSV."
    )
    parser.add_argument(
        "--directory", default="output", help="directory for the CSV output (default: output)"
    )
    args = parser.parse_args(argv)

    console = Console()
    try:
        console.write("Hello, this is a solver for strange attractors. Enjoy!\n")
        console.prompt("Press enter to continue")
        system = ask_system(ask_system_choice(console), console)
        method = ask_method(console)
        h, start, end = ask_times(console)
        file_name = console.prompt("Enter output file name (no extension included): ")
    except EOFError:
        console.write("\n")
        return 1

    directory = Path(args.directory)
    directory.mkdir(parents=True, exist_ok=True)
    solver = Solver(system, h, start, end, file_name, directory)
    if method == 1:
        solver.euler()
    else:
        solver.rk4()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())