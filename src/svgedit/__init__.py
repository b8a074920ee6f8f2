"""Read, query, edit and render SVG documents and parse their path data."""

from __future__ import annotations

from svgedit.editor import (
    ElementNotFoundError,
    set_base64_image,
    set_content,
    set_image,
)
from svgedit.element import Element
from svgedit.path_data import (
    Command,
    NumberRangeError,
    ParamCountError,
    Path,
    PathDataError,
    Subpath,
    UnexpectedTokenError,
    UnknownCommandError,
    parse_path,
)
from svgedit.style import Style, Styles, parse_style
from svgedit.utils import parse, read_tree, render

__all__ = [
    "Command",
    "Element",
    "ElementNotFoundError",
    "NumberRangeError",
    "ParamCountError",
    "Path",
    "PathDataError",
    "Style",
    "Styles",
    "Subpath",
    "UnexpectedTokenError",
    "UnknownCommandError",
    "parse",
    "parse_path",
    "parse_style",
    "read_tree",
    "render",
    "set_base64_image",
    "set_content",
    "set_image",
]
