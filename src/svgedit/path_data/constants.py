"""Constants for the SVG path data parser."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Literal, NamedTuple, TypeAlias

COMMANDS = "MmLlHhVvCcSsQqTtAaZz"
"""A string containing all the valid SVG path commands."""

MOVETO_COMMANDS = frozenset("Mm")
"""The commands that start a new subpath."""

Symbol: TypeAlias = Literal[
    "M", "m", "L", "l", "H", "h", "V", "v", "C", "c",
    "S", "s", "Q", "q", "T", "t", "A", "a", "Z", "z",
]  # fmt: skip
"""A type alias for the valid SVG path commands."""


class CommandSpec(NamedTuple):
    """Parameter arity and implicit repetition target of a command."""

    arity: int
    repeat: Symbol


def _specs(upper: Symbol, lower: Symbol, arity: int) -> dict[str, CommandSpec]:
    return {upper: CommandSpec(arity, upper), lower: CommandSpec(arity, lower)}


COMMAND_SPECS: MappingProxyType[str, CommandSpec] = MappingProxyType(
    {
        # only the first pair after a moveto moves, the rest draw lines
        "M": CommandSpec(2, "L"),
        "m": CommandSpec(2, "l"),
        **_specs("L", "l", 2),
        **_specs("H", "h", 1),
        **_specs("V", "v", 1),
        **_specs("C", "c", 6),
        **_specs("S", "s", 4),
        **_specs("Q", "q", 4),
        **_specs("T", "t", 2),
        **_specs("A", "a", 7),
        **_specs("Z", "z", 0),
    }
)
"""The number of parameters and the repetition symbol of each command."""

SEPARATOR_PATTERN = re.compile(r"[ \t\n\r\f,]*")
"""A regex pattern to skip separators between tokens."""

NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)
"""A regex pattern to match a single number literal without exponent."""

NUMBER_START = frozenset("0123456789+-.")
"""Characters that can start a number literal."""
