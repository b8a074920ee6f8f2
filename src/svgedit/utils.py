"""Functions for reading and writing SVG trees."""

from __future__ import annotations

import logging
import re
from io import BytesIO
from pathlib import Path
from typing import TYPE_CHECKING, TypeAlias
from xml.etree import ElementTree as ET

from defusedxml.ElementTree import iterparse

from svgedit import config
from svgedit.element import Element, filtered_tag

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

Declarations: TypeAlias = dict[ET.Element, list[tuple[str, str]]]

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

_QNAME_PATTERN = re.compile(r"\{(.*)\}(.*)")


def canonize_attr_name(name: str, prefixes: Mapping[str, str]) -> str:
    """Replace the namespace of an attribute name by its declared prefix.

    Args:
        name: The attribute name as given by ElementTree, ``{uri}local``
            for namespaced attributes.
        prefixes: The declared prefix of each namespace uri.

    Examples:
        >>> xlink = "http://www.w3.org/1999/xlink"
        >>> canonize_attr_name("{" + xlink + "}href", {xlink: "xlink"})
        'xlink:href'
        >>> canonize_attr_name("{urn:undeclared}href", {})
        'href'
        >>> canonize_attr_name("width", {})
        'width'
    """
    match = _QNAME_PATTERN.fullmatch(name)
    if match is None:
        return name

    uri, local = match.groups()
    if prefix := prefixes.get(uri):
        return f"{prefix}:{local}"

    return local


def _read_events(data: bytes) -> tuple[ET.Element, Declarations]:
    """Parse the document and collect the namespaces each element declares."""
    root: ET.Element | None = None
    declarations: Declarations = {}
    pending: list[tuple[str, str]] = []

    for event, item in iterparse(BytesIO(data), events=("start-ns", "start")):
        if event == "start-ns":
            pending.append(item)
            continue

        if root is None:
            root = item
        if pending:
            declarations[item] = pending
            pending = []

    if root is None:
        raise ET.ParseError("No root element found")

    return root, declarations


def _convert(
    elem: ET.Element, prefixes: Mapping[str, str], declarations: Declarations
) -> Element:
    attributes: dict[str, str] = {}
    for prefix, uri in declarations.get(elem, ()):
        attributes[f"xmlns:{prefix}" if prefix else "xmlns"] = uri

    for key, value in elem.attrib.items():
        name = canonize_attr_name(key, prefixes)
        if name != key:
            logger.debug("Canonized attribute %s as %s", key, name)
        attributes[name] = value

    # the last chunk of text that is not blank, also after child elements
    chunks = [elem.text, *(child.tail for child in elem)]
    content = next((c for c in reversed(chunks) if c and c.strip()), "")
    children = [_convert(child, prefixes, declarations) for child in elem]

    return Element(filtered_tag(elem.tag), attributes, children, content)


def save_parse(data: bytes) -> Element:
    """Safely parse an SVG document into an element tree."""
    root, declarations = _read_events(data)

    prefixes = {XML_NAMESPACE: "xml"}
    for declared in declarations.values():
        for prefix, uri in declared:
            if prefix:
                prefixes.setdefault(uri, prefix)

    return _convert(root, prefixes, declarations)


def read_tree(data: str | bytes | Path) -> Element:
    """Read an SVG tree.

    Text is treated as UTF-8. Empty input gives an empty element.
    The content of an element is its last text chunk that is not blank,
    whether before or between its children.

    Raises:
        xml.etree.ElementTree.ParseError: If the document is malformed.
    """
    if isinstance(data, Path):
        data = data.read_bytes()
    elif isinstance(data, str):
        data = data.encode("utf-8")

    if not data.strip():
        return Element()

    return save_parse(data)


parse = read_tree


def to_etree(elem: Element, sort_attributes: bool = False) -> ET.Element:
    """Convert an element tree into an ElementTree tree."""
    keys = sorted(elem.attributes) if sort_attributes else list(elem.attributes)
    tree = ET.Element(elem.name, {key: elem.attributes[key] for key in keys})
    tree.text = elem.content or None
    for child in elem.children:
        tree.append(to_etree(child, sort_attributes))

    return tree


def to_string(tree: ET.Element) -> str:
    """Convert an ElementTree element to a string."""
    return ET.tostring(tree, encoding="unicode", short_empty_elements=False).strip()


def render(elem: Element, sort_attributes: bool | None = None) -> str:
    """Render an element tree to SVG.

    Args:
        elem: The root element.
        sort_attributes: If the attributes are written in sorted order.
            Defaults to ``svgedit.config.SORT_ATTRIBUTES``.

    Examples:
        >>> render(Element("rect", {"width": "5", "height": "3"}), True)
        '<rect height="3" width="5"></rect>'
    """
    if not elem.name:
        return ""

    if sort_attributes is None:
        sort_attributes = config.SORT_ATTRIBUTES

    return to_string(to_etree(elem, sort_attributes))
