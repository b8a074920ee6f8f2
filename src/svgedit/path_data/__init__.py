"""Parse SVG path data into subpaths of commands."""

from __future__ import annotations

from .commands import lookup_command
from .constants import COMMAND_SPECS, CommandSpec, Symbol
from .errors import (
    NumberRangeError,
    ParamCountError,
    PathDataError,
    UnexpectedTokenError,
    UnknownCommandError,
)
from .model import Command, Path, Subpath, format_number
from .numbers import scan_number, scan_numbers, skip_separators
from .parser import parse_path

__all__ = [
    "COMMAND_SPECS",
    "Command",
    "CommandSpec",
    "NumberRangeError",
    "ParamCountError",
    "Path",
    "PathDataError",
    "Subpath",
    "Symbol",
    "UnexpectedTokenError",
    "UnknownCommandError",
    "format_number",
    "lookup_command",
    "parse_path",
    "scan_number",
    "scan_numbers",
    "skip_separators",
]
