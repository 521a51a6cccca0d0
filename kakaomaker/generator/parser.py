"""Layout file parser using lxml."""

from pathlib import Path
from typing import IO

from lxml import etree

from .types import LayoutFile, LayoutNode


class LayoutParseError(RuntimeError):
    """Raised when a layout file cannot be read or is not well-formed XML."""


def _new_parser() -> etree.XMLParser:
    return etree.XMLParser(remove_comments=True, remove_pis=True, resolve_entities=False)


def _to_node(element: etree._Element) -> LayoutNode:
    return LayoutNode(
        tag=element.tag,
        attributes=dict(element.attrib),
        # Only elements; anything else has a non-string tag
        children=[_to_node(child) for child in element if isinstance(child.tag, str)],
    )


def parse(source: str | Path | IO[bytes], name: str | None = None) -> LayoutNode:
    """Parse a layout file and return its root node.

    A new XMLParser is created for every call, so repeated or concurrent
    parses never share parser state.
    """
    if isinstance(source, (str, Path)):
        source = str(source)
        label = name or source
    else:
        label = name or str(getattr(source, "name", "<stream>"))
    try:
        tree = etree.parse(source, _new_parser())
    except etree.XMLSyntaxError as e:
        raise LayoutParseError(f"Malformed layout {label}: {e}") from e
    except OSError as e:
        raise LayoutParseError(f"Cannot read layout {label}: {e}") from e
    return _to_node(tree.getroot())


def parse_file(layout: LayoutFile) -> LayoutNode:
    return parse(layout.path, name=str(layout.path))


def parse_string(text: str, name: str = "<string>") -> LayoutNode:
    """Parse layout XML held in memory."""
    try:
        root = etree.fromstring(text.encode("utf-8"), _new_parser())
    except etree.XMLSyntaxError as e:
        raise LayoutParseError(f"Malformed layout {name}: {e}") from e
    return _to_node(root)
