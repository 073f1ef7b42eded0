"""XML utilities for WebDAV."""

from __future__ import annotations

from lxml import etree

from .internal import DecodeError


def parse_xml(data: bytes | str) -> etree._Element:
    """Parse an XML body into its root element.

    Entity expansion and network access are disabled.

    Args:
        data: Raw XML body

    Returns:
        Root element of the document

    Raises:
        DecodeError: If the body is not well-formed XML
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        return etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        raise DecodeError("malformed XML", e) from e


def serialize_xml(element: etree._Element) -> bytes:
    """Serialize an element to bytes with an XML declaration."""
    return etree.tostring(element, encoding="utf-8", xml_declaration=True)


def local_name(element: etree._Element) -> str:
    """Get the tag name of an element without its namespace."""
    return element.tag.split("}")[-1]


def find_local(element: etree._Element, name: str) -> etree._Element | None:
    """Find the first direct child with the given local name, any namespace."""
    for child in element:
        # Skip comments and processing instructions
        if not isinstance(child.tag, str):
            continue
        if local_name(child) == name:
            return child
    return None


def element_text(element: etree._Element | None) -> str:
    """Get the character data of an element, "" if missing or empty."""
    if element is None:
        return ""
    return element.text or ""
