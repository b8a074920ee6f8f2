"""Split the ``style`` attribute into its declarations."""

from __future__ import annotations

from typing import NamedTuple

from typing_extensions import override


class Style(NamedTuple):
    """A single ``property:value`` declaration."""

    property: str
    value: str

    @override
    def __str__(self) -> str:
        return f"{self.property}:{self.value}"


class Styles(list[Style]):
    """The declarations of a style attribute in order."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get the value of the last declaration of a property."""
        for style in reversed(self):
            if style.property == key:
                return style.value
        return default

    def as_dict(self) -> dict[str, str]:
        """The declarations as a mapping, later ones override earlier ones."""
        return {style.property: style.value for style in self}

    def to_string(self) -> str:
        """Join the declarations back into a style attribute.

        Examples:
            >>> parse_style("fill: white; stroke:#000").to_string()
            'fill:white;stroke:#000'
        """
        return ";".join(str(style) for style in self)


def parse_style(style: str) -> Styles:
    """Split a style attribute into declarations.

    Empty declarations are dropped and whitespace around properties and
    values is removed.

    Raises:
        ValueError: If a declaration has no colon.

    Examples:
        >>> parse_style("fill:white;stroke-opacity:1;")
        [Style(property='fill', value='white'), Style(property='stroke-opacity', value='1')]
    """  # noqa: E501
    styles = Styles()
    for declaration in style.split(";"):
        if not declaration.strip():
            continue

        key, sep, value = declaration.partition(":")
        if not sep:
            raise ValueError(f"Invalid style declaration: {declaration.strip()!r}")

        styles.append(Style(key.strip(), value.strip()))

    return styles
