"""Parse SVG path data into subpaths and commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .commands import lookup_command
from .constants import MOVETO_COMMANDS
from .errors import ParamCountError, UnexpectedTokenError
from .model import Command, Path, Subpath
from .numbers import scan_number, skip_separators, starts_number

if TYPE_CHECKING:
    from .constants import Symbol

logger = logging.getLogger(__name__)


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _scan_group(
    d: str, pos: int, command: str, arity: int
) -> tuple[tuple[float, ...], int]:
    """Scan exactly ``arity`` numbers for one command.

    Raises:
        ParamCountError: If fewer numbers are available.
    """
    params: list[float] = []
    for _ in range(arity):
        result = scan_number(d, pos)
        if result is None:
            raise ParamCountError(
                command, len(params), arity, skip_separators(d, pos)
            )
        value, pos = result
        params.append(value)

    return tuple(params), pos


def parse_path(d: str) -> Path:
    """Parse the data of a ``d`` attribute.

    Each parameter group becomes its own command. Groups that follow a
    command without repeating its letter are implicit repetitions of it,
    except that pairs after a moveto are linetos.

    Args:
        d: The path data.

    Returns:
        The parsed path. Empty data gives a path without subpaths.

    Raises:
        UnexpectedTokenError: If a command letter was expected but not
            found, including data that does not start with a moveto.
        UnknownCommandError: If a letter is not an SVG path command.
        ParamCountError: If a command is followed by too few numbers.
        NumberRangeError: If a number is too large for a float.

    Example:
        >>> path = parse_path("M 10,20 L 30,30 Z")
        >>> [command.to_string() for command in path.commands]
        ['M 10 20', 'L 30 30', 'Z']
    """
    subpaths: list[list[Command]] = []
    pos = skip_separators(d, 0)

    while pos < len(d):
        letter = d[pos]
        if not _is_letter(letter):
            raise UnexpectedTokenError(letter, pos)

        spec = lookup_command(letter, pos)

        if letter in MOVETO_COMMANDS:
            subpaths.append([])
        elif not subpaths:
            raise UnexpectedTokenError(letter, pos)

        commands = subpaths[-1]
        symbol: Symbol = letter  # type: ignore[assignment]
        pos += 1

        while True:
            params, pos = _scan_group(d, pos, letter, spec.arity)
            commands.append(Command(symbol, params))
            symbol = spec.repeat

            pos = skip_separators(d, pos)
            if not starts_number(d, pos):
                break

            if spec.arity == 0:
                # numbers after a closepath
                raise UnexpectedTokenError(d[pos], pos)

    logger.debug("Parsed path data into %d subpaths", len(subpaths))

    return Path(tuple(Subpath(tuple(commands)) for commands in subpaths))
