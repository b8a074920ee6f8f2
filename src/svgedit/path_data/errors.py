"""Errors raised while parsing SVG path data."""

from __future__ import annotations


class PathDataError(ValueError):
    """Base class for malformed path data.

    Attributes:
        position: The index into the path data where parsing stopped.
    """

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position


class UnexpectedTokenError(PathDataError):
    """A command letter was required but something else was found."""

    def __init__(self, token: str, position: int) -> None:
        """Initialize the error.

        Args:
            token: The offending character, empty at the end of the input.
            position: The index of the offending character.
        """
        super().__init__(
            f"Unexpected token {token!r} at position {position}", position
        )
        self.token = token


class UnknownCommandError(PathDataError):
    """A letter that is not one of the SVG path commands."""

    def __init__(self, command: str, position: int) -> None:
        super().__init__(
            f"Unknown command {command!r} at position {position}", position
        )
        self.command = command


class ParamCountError(PathDataError):
    """A command is followed by fewer numbers than its arity requires."""

    def __init__(self, command: str, found: int, expected: int, position: int) -> None:
        """Initialize the error.

        Args:
            command: The command letter as written in the path data.
            found: How many numbers of the incomplete group were read.
            expected: The arity of the command.
            position: The index where the next number was expected.
        """
        super().__init__(f"Incorrect number of parameters for {command}", position)
        self.command = command
        self.found = found
        self.expected = expected


class NumberRangeError(PathDataError):
    """A number literal that does not fit into a float."""

    def __init__(self, literal: str, position: int) -> None:
        super().__init__(
            f"Number {literal!r} at position {position} is out of range", position
        )
        self.literal = literal
