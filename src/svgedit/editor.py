"""Edit the content of SVG elements by id."""

from __future__ import annotations

import base64
import binascii
import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svgedit.element import Element

logger = logging.getLogger(__name__)

IMAGE_SIGNATURES: dict[bytes, str] = {
    b"\x89PNG\r\n\x1a\n": "image/png",
    b"\xff\xd8\xff": "image/jpeg",
    b"GIF87a": "image/gif",
    b"GIF89a": "image/gif",
    b"BM": "image/bmp",
}
"""Leading bytes of the image formats that can be embedded."""

SVG_PROLOG_LIMIT = 1024
"""How far into XML data the ``<svg`` tag is searched for."""


class ElementNotFoundError(LookupError):
    """No element with the requested id exists."""

    def __init__(self, id_: str) -> None:
        super().__init__(f"Element not found: {id_!r}")
        self.id = id_


def _get(root: Element, id_: str) -> Element:
    elem = root.find_id(id_)
    if elem is None:
        raise ElementNotFoundError(id_)
    return elem


def detect_mime_type(data: bytes) -> str:
    """Detect the MIME type of image data from its leading bytes.

    XML is only taken as SVG if an ``<svg`` tag follows the prolog closely.

    Examples:
        >>> detect_mime_type(b"GIF89a...")
        'image/gif'
        >>> detect_mime_type(b"RIFF....WEBPVP8 ")
        'image/webp'
        >>> detect_mime_type(b"plain")
        'application/octet-stream'
        >>> detect_mime_type(b'<?xml version="1.0"?><svg/>')
        'image/svg+xml'
        >>> detect_mime_type(b'<?xml version="1.0"?><html/>')
        'application/octet-stream'
    """
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"

    head = data.lstrip()
    if head.startswith(b"<svg") or (
        head.startswith(b"<?xml") and b"<svg" in head[:SVG_PROLOG_LIMIT]
    ):
        return "image/svg+xml"

    for signature, mime in IMAGE_SIGNATURES.items():
        if head.startswith(signature):
            return mime

    return "application/octet-stream"


def set_content(root: Element, id_: str, text: str) -> None:
    """Replace the text content of the element with the given id.

    Raises:
        ElementNotFoundError: If no element has the id.
    """
    _get(root, id_).content = text


def set_base64_image(root: Element, id_: str, content: str) -> None:
    """Replace the embedded image of the element with the given id.

    Content that is not a data URL yet is treated as base64 encoded image
    data and wrapped into one.

    Args:
        root: The root of the tree.
        id_: The id of the image element.
        content: A ``data:`` URL or base64 encoded image data.

    Raises:
        ElementNotFoundError: If no element has the id.
        ValueError: If the content is neither a data URL nor valid base64.
    """
    elem = _get(root, id_)

    if not content.startswith("data:"):
        # base64 may be wrapped into lines
        content = "".join(content.split())
        try:
            data = base64.b64decode(content, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Image content for {id_!r} is not base64") from e

        mime = detect_mime_type(data)
        logger.debug("Embedding %d bytes as %s into %r", len(data), mime, id_)
        content = f"data:{mime};base64,{content}"

    elem.attributes["href"] = content


def set_image(
    root: Element, id_: str, path: str | Path, embed: bool = True
) -> None:
    """Replace the image of the element with the given id by a file.

    Args:
        root: The root of the tree.
        id_: The id of the image element.
        path: The image file.
        embed: If the file is embedded as a data URL. Otherwise the image
            links to the path.

    Raises:
        ElementNotFoundError: If no element has the id.
        OSError: If the file cannot be read.
    """
    path = Path(path)

    if not embed:
        _get(root, id_).attributes["href"] = path.as_posix()
        return

    content = base64.b64encode(path.read_bytes()).decode("ascii")
    set_base64_image(root, id_, content)
