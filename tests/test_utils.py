"""Tests reading and rendering SVG trees."""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

import pytest
from defusedxml import EntitiesForbidden

from svgedit import config
from svgedit.element import Element
from svgedit.utils import parse, read_tree, render

if TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.parametrize(
    ("svg", "expected"),
    [
        (
            """
            <svg width="100" height="100">
                <circle cx="50" cy="50" r="40" fill="red" />
            </svg>
            """,
            Element(
                "svg",
                {"width": "100", "height": "100"},
                [Element("circle", {"cx": "50", "cy": "50", "r": "40", "fill": "red"})],
            ),
        ),
        (
            """
            <svg height="400" width="450">
                <g stroke="black" stroke-width="3" fill="black">
                    <path id="AB" d="M 100 350 L 150 -300" stroke="red" />
                    <path id="BC" d="M 250 50 L 150 300" stroke="red" />
                    <path d="M 175 200 L 150 0" stroke="green" />
                </g>
            </svg>
            """,
            Element(
                "svg",
                {"width": "450", "height": "400"},
                [
                    Element(
                        "g",
                        {"stroke": "black", "stroke-width": "3", "fill": "black"},
                        [
                            Element(
                                "path",
                                {
                                    "id": "AB",
                                    "d": "M 100 350 L 150 -300",
                                    "stroke": "red",
                                },
                            ),
                            Element(
                                "path",
                                {
                                    "id": "BC",
                                    "d": "M 250 50 L 150 300",
                                    "stroke": "red",
                                },
                            ),
                            Element(
                                "path", {"d": "M 175 200 L 150 0", "stroke": "green"}
                            ),
                        ],
                    )
                ],
            ),
        ),
        ("", Element()),
    ],
)
def test_parse(svg: str, expected: Element) -> None:
    assert parse(svg) == expected


VALID_DOCUMENT = """\
<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" id="svg-root" width="100%" height="100%" viewBox="0 0 480 360">
    <title id="test-title">color-prop-01-b</title>
    <desc id="test-desc">Test that viewer has the basic capability</desc>
    <rect id="test-frame" x="1" y="1" width="478" height="358" fill="none" stroke="#000000"/>
    <image id="logo" xlink:href="logo.png" xml:lang="en" width="10" height="10"/>
</svg>
"""  # noqa: E501


def test_namespaces() -> None:
    root = parse(VALID_DOCUMENT)

    assert root.name == "svg"
    assert root.attributes["xmlns"] == "http://www.w3.org/2000/svg"
    assert root.attributes["xmlns:xlink"] == "http://www.w3.org/1999/xlink"
    assert [child.name for child in root.children] == ["title", "desc", "rect", "image"]

    image = root.children[-1]
    assert image.attributes["xlink:href"] == "logo.png"
    assert image.attributes["xml:lang"] == "en"


def test_content() -> None:
    root = parse(VALID_DOCUMENT)

    assert root.children[0].content == "color-prop-01-b"
    assert root.content == ""
    assert root.children[2].content == ""


@pytest.mark.parametrize(
    ("svg", "content"),
    [
        ("<text><tspan>a</tspan>Hi</text>", "Hi"),
        ("<text>Before<tspan/>After</text>", "After"),
        ("<text>Before<tspan/> </text>", "Before"),
        ("<text> <tspan/> </text>", ""),
    ],
)
def test_content_after_children(svg: str, content: str) -> None:
    root = parse(svg)

    assert root.content == content
    assert content in render(root)


def test_read_tree_from_file(tmp_path: Path) -> None:
    file = tmp_path / "doc.svg"
    file.write_text(VALID_DOCUMENT, "utf-8")

    assert read_tree(file) == parse(VALID_DOCUMENT)
    assert read_tree(VALID_DOCUMENT.encode("utf-8")) == parse(VALID_DOCUMENT)


def test_malformed() -> None:
    with pytest.raises(ET.ParseError):
        parse("<svg><g></svg>")


def test_entities_forbidden() -> None:
    svg = '<!DOCTYPE svg [<!ENTITY a "aaaa">]><svg><text>&a;</text></svg>'
    with pytest.raises(EntitiesForbidden):
        parse(svg)


@pytest.mark.parametrize(
    ("svg", "element"),
    [
        (
            '<svg height="100" width="100"><circle cx="50" cy="50" fill="red" r="40"></circle></svg>',  # noqa: E501
            Element(
                "svg",
                {"width": "100", "height": "100"},
                [Element("circle", {"cx": "50", "cy": "50", "r": "40", "fill": "red"})],
            ),
        ),
        (
            '<svg height="400" width="450"><g fill="black" stroke="black" stroke-width="3"><path d="M 100 350 L 150 -300" id="AB" stroke="red"></path></g></svg>',  # noqa: E501
            Element(
                "svg",
                {"width": "450", "height": "400"},
                [
                    Element(
                        "g",
                        {"stroke-width": "3", "stroke": "black", "fill": "black"},
                        [
                            Element(
                                "path",
                                {
                                    "id": "AB",
                                    "d": "M 100 350 L 150 -300",
                                    "stroke": "red",
                                },
                            )
                        ],
                    )
                ],
            ),
        ),
    ],
)
def test_render(svg: str, element: Element) -> None:
    assert render(element, sort_attributes=True) == svg


def test_render_keeps_order() -> None:
    elem = Element("text", {"y": "1", "x": "2"}, content="a < b")

    assert render(elem, sort_attributes=False) == '<text y="1" x="2">a &lt; b</text>'


def test_render_default_from_config(monkeypatch: pytest.MonkeyPatch) -> None:
    elem = Element("rect", {"y": "1", "x": "2"})

    monkeypatch.setattr(config, "SORT_ATTRIBUTES", True)
    assert render(elem) == '<rect x="2" y="1"></rect>'

    monkeypatch.setattr(config, "SORT_ATTRIBUTES", False)
    assert render(elem) == '<rect y="1" x="2"></rect>'


def test_render_empty() -> None:
    assert render(Element()) == ""


def test_parse_render_roundtrip() -> None:
    root = parse(VALID_DOCUMENT)

    assert parse(render(root)) == root
    assert parse(render(root, sort_attributes=True)) == root
