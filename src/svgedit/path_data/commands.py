"""Look up the parameter arity of SVG path commands."""

from __future__ import annotations

from .constants import COMMAND_SPECS, CommandSpec
from .errors import UnknownCommandError


def lookup_command(command: str, position: int = 0) -> CommandSpec:
    """Get the arity and the implicit repetition symbol of a command.

    Args:
        command: The command letter.
        position: The position of the letter in the path data, used for
            error reporting.

    Raises:
        UnknownCommandError: If the letter is not an SVG path command.

    Examples:
        >>> lookup_command("M")
        CommandSpec(arity=2, repeat='L')
        >>> lookup_command("c")
        CommandSpec(arity=6, repeat='c')
    """
    try:
        return COMMAND_SPECS[command]
    except KeyError:
        raise UnknownCommandError(command, position) from None
