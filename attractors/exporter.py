"""CSV output of trajectories."""

from __future__ import annotations

import os
from pathlib import Path
from types import TracebackType

from attractors.state import State

HEADER = "x,y,z\n"


def format_number(value: float) -> str:
    """Format a number the way a default-configured text stream does (6 significant digits)."""
    return format(value, "g")


class Exporter:
    """Writes states as rows of ``<directory>/<file_name>.csv``."""

    def __init__(
        self, file_name: str = "output", directory: str | os.PathLike[str] = "output"
    ) -> None:
        self.file_name = file_name
        self.path = Path(directory) / f"{file_name}.csv"
        self._file = self.path.open("w", encoding="utf-8", newline="")
        self._file.write(HEADER)

    def add_state(self, state: State) -> None:
        """Append one state as a CSV row."""
        self._file.write(
            f"{format_number(state.x)},{format_number(state.y)},{format_number(state.z)}\n"
        )

    def close(self) -> None:
        """Flush and close the output file."""
        self._file.close()

    def __enter__(self) -> Exporter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()