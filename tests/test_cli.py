import io
import sys

import pytest

from attractors.cli import (
    DEFAULT_TIMES,
    Console,
    ask_default_choice,
    ask_method,
    ask_system,
    ask_system_choice,
    ask_times,
    main,
    parse_numbers,
)
from attractors.exporter import format_number
from attractors.solver import euler_steps, rk4_steps
from attractors.state import State
from attractors.systems import (
    ChenSystem,
    HalvorsenSystem,
    LorenzSystem,
    RosslerSystem,
    SprottSystem,
)


def make_console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_console_prompt_returns_line_without_newline():
    console, out = make_console("hello\n")
    assert console.prompt("say: ") == "hello"
    assert out.getvalue() == "say: "


def test_console_prompt_raises_at_end_of_input():
    console, _ = make_console("")
    with pytest.raises(EOFError):
        console.prompt("x")


def test_parse_numbers_reads_exact_count():
    assert parse_numbers("1 2 3", 3) == (1.0, 2.0, 3.0)
    assert parse_numbers("  .5   -2 ", 2) == (0.5, -2.0)


@pytest.mark.parametrize("text", ["1 2", "", "a b c", "1 2abc 3"])
def test_parse_numbers_rejects_too_few(text):
    with pytest.raises(ValueError):
        parse_numbers(text, 3)


@pytest.mark.parametrize("text", ["1 2 3 4", "1 2 3abc"])
def test_parse_numbers_rejects_trailing_text(text):
    with pytest.raises(ValueError):
        parse_numbers(text, 3)


def test_ask_system_choice_repeats_until_valid():
    console, out = make_console("x\n0\n12\n4\n")
    assert ask_system_choice(console) == 4
    assert out.getvalue().count("Please select one of the following attractors") == 4


def test_ask_system_choice_rejects_seven():
    console, _ = make_console("7\n6\n")
    assert ask_system_choice(console) == 6


def test_ask_default_choice():
    console, out = make_console("3\n2\n")
    assert ask_default_choice(console) == 2
    assert "ATTRACTOR" in out.getvalue()


@pytest.mark.parametrize(
    "choice, expected",
    [(1, LorenzSystem()), (3, HalvorsenSystem()), (4, RosslerSystem()), (5, ChenSystem())],
)
def test_ask_system_default(choice, expected):
    console, _ = make_console("1\n")
    assert ask_system(choice, console) == expected


def test_ask_system_custom_lorenz_with_retries():
    console, out = make_console("2\n-1 2 3\n1 2 3 4\nfoo\n1 2 3\n4 5 6\n")
    system = ask_system(1, console)
    assert system == LorenzSystem(State(4.0, 5.0, 6.0), 1.0, 2.0, 3.0)
    text = out.getvalue()
    assert "All parameters must be positive." in text
    assert "Please follow the correct format (exactly 3 numbers)." in text
    assert "Invalid input. Please enter three numbers separated by spaces." in text


def test_ask_system_custom_halvorsen():
    console, out = make_console("2\n1 2\n1.5\n0 0 1\n")
    system = ask_system(3, console)
    assert system == HalvorsenSystem(State(0.0, 0.0, 1.0), 1.5)
    assert "Please follow the correct format.\n" in out.getvalue()


def test_ask_system_custom_sprott():
    console, out = make_console("2\n1 2 3\n1 2\n1 1 1\n")
    assert ask_system(6, console) == SprottSystem(State(1.0, 1.0, 1.0), 1.0, 2.0)
    assert "exactly 2 numbers" in out.getvalue()


def test_ask_system_unknown_choice():
    console, _ = make_console("1\n")
    with pytest.raises(ValueError):
        ask_system(9, console)


def test_ask_method():
    console, _ = make_console("5\n2\n")
    assert ask_method(console) == 2


def test_ask_times_default():
    console, out = make_console("1\n")
    assert ask_times(console) == DEFAULT_TIMES
    assert "NUMERICAL METHOD" in out.getvalue()


def test_ask_times_custom_requires_start_before_end():
    console, out = make_console("2\n0.1 5 2\n0.1 0 2\n0.1 1 2\n")
    assert ask_times(console) == (0.1, 1.0, 2.0)
    text = out.getvalue()
    assert "Must be start time < end time." in text
    assert "All parameters must be positive." in text


@pytest.mark.parametrize("method, steps", [("1", euler_steps), ("2", rk4_steps)])
def test_main_writes_trajectory(tmp_path, monkeypatch, method, steps):
    answers = f"\n1\n1\n{method}\n2\n0.1 1 2\ntraj\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(answers))
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    assert main(["--directory", str(tmp_path)]) == 0
    lines = (tmp_path / "traj.csv").read_text().splitlines()
    expected = list(steps(LorenzSystem(), 0.1, 1.0, 2.0))
    assert lines[0] == "x,y,z"
    assert lines[1] == "1,1,1"
    assert len(lines) == len(expected) + 1
    last = expected[-1]
    assert lines[-1] == ",".join(format_number(v) for v in (last.x, last.y, last.z))


def test_main_stops_on_end_of_input(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n1\n"))
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    assert main(["--directory", str(tmp_path)]) == 1
    assert list(tmp_path.iterdir()) == []