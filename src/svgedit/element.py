"""SVG element tree."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from typing_extensions import override

from svgedit.path_data import parse_path, scan_numbers
from svgedit.style import Styles, parse_style

if TYPE_CHECKING:
    from collections.abc import Iterator

    from svgedit.path_data import Path


def filtered_tag(tag: str) -> str:
    """Get the tag without the namespace.

    Examples:
        >>> filtered_tag("{http://www.w3.org/2000/svg}circle")
        'circle'
        >>> filtered_tag("circle")
        'circle'
    """
    return re.sub(r"\{.*\}", "", tag)


@dataclass
class Element:
    """An SVG element with its attributes, children and text content.

    Two elements are equal if their names, attributes, content and
    children are equal.
    """

    name: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Element] = field(default_factory=list)
    content: str = ""

    @override
    def __repr__(self) -> str:
        id_ = self.attributes.get("id", "")
        id_suffix = f" (#{id_})" if id_ else ""
        return f"<{self.name}{id_suffix}>"

    def iter(self) -> Iterator[Element]:
        """Iterate over the element and all its descendants depth first."""
        yield self
        for child in self.children:
            yield from child.iter()

    def find_all(self, name: str) -> list[Element]:
        """Find all descendants with the given tag name in document order."""
        return [elem for elem in self.iter() if elem is not self and elem.name == name]

    def find_id(self, id_: str) -> Element | None:
        """Find the first element with the given id, including this one."""
        return next((e for e in self.iter() if e.attributes.get("id") == id_), None)

    @property
    def path(self) -> Path:
        """The parsed ``d`` attribute.

        Raises:
            KeyError: If the element has no ``d`` attribute.
            PathDataError: If the path data is malformed.
        """
        return parse_path(self.attributes["d"])

    @property
    def styles(self) -> Styles:
        """The parsed ``style`` attribute, empty if there is none."""
        return parse_style(self.attributes.get("style", ""))

    def as_floats(self, key: str) -> list[float]:
        """Get a number list attribute such as ``points`` or ``viewBox``."""
        return scan_numbers(self.attributes[key])
