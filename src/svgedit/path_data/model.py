"""Structured SVG path data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from typing_extensions import override

from .constants import COMMAND_SPECS, MOVETO_COMMANDS

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .constants import Symbol


def format_number(value: float) -> str:
    """Format a number in positional notation, as short as round-tripping allows.

    Examples:
        >>> format_number(10.0)
        '10'
        >>> format_number(-0.25)
        '-0.25'
        >>> format_number(1e-7)
        '0.0000001'
    """
    return np.format_float_positional(value, trim="-")


@dataclass(frozen=True)
class Command:
    """A single path command with one group of parameters."""

    symbol: Symbol
    params: tuple[float, ...] = ()

    @property
    def arity(self) -> int:
        """The number of parameters the command takes."""
        return COMMAND_SPECS[self.symbol].arity

    @property
    def is_relative(self) -> bool:
        """If the parameters are relative to the current point."""
        return self.symbol.islower()

    def to_string(self) -> str:
        """The command as path data.

        Examples:
            >>> Command("L", (30.0, 30.5)).to_string()
            'L 30 30.5'
            >>> Command("z").to_string()
            'z'
        """
        return " ".join([self.symbol, *map(format_number, self.params)])

    @override
    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class Subpath:
    """Commands from a moveto up to the next moveto."""

    commands: tuple[Command, ...]

    def __post_init__(self) -> None:
        if not self.commands or self.commands[0].symbol not in MOVETO_COMMANDS:
            raise ValueError("A subpath has to start with a moveto command")

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __getitem__(self, index: int) -> Command:
        return self.commands[index]

    def to_string(self) -> str:
        """The subpath as path data."""
        return " ".join(command.to_string() for command in self.commands)

    @override
    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class Path:
    """Parsed data of a ``d`` attribute."""

    subpaths: tuple[Subpath, ...] = ()

    def __iter__(self) -> Iterator[Subpath]:
        return iter(self.subpaths)

    def __len__(self) -> int:
        return len(self.subpaths)

    def __getitem__(self, index: int) -> Subpath:
        return self.subpaths[index]

    @property
    def commands(self) -> Iterator[Command]:
        """All commands of all subpaths in order."""
        for subpath in self.subpaths:
            yield from subpath

    def to_string(self) -> str:
        """The path as canonical path data.

        Implicit repetitions are written out, so a parsed path serializes
        to data that parses back to an equal path.

        Examples:
            >>> from svgedit.path_data import parse_path
            >>> parse_path("M10-20 30,40z").to_string()
            'M 10 -20 L 30 40 z'
        """
        return " ".join(subpath.to_string() for subpath in self.subpaths)

    @override
    def __str__(self) -> str:
        return self.to_string()
