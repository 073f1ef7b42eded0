"""Debug logging for the WebDAV codec."""

from __future__ import annotations

import logging

from lxml import etree

from .internal.internal import DecodeError
from .internal.xml_utils import parse_xml

logger = logging.getLogger("webdav_api")

# Bytes of a non-XML body shown in the log
PREVIEW_SIZE = 200


def format_xml(body: bytes | str) -> str:
    """Indent an XML body for the log, or return it as text if it isn't XML."""
    try:
        root = parse_xml(body)
    except DecodeError:
        if isinstance(body, bytes):
            return body.decode("utf-8", errors="replace")
        return body
    etree.indent(root, space="  ")
    return etree.tostring(root, encoding="unicode")


def _is_xml(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type in ("application/xml", "text/xml") or media_type.endswith("+xml")


def log_body(label: str, body: bytes | str | None, content_type: str | None = None) -> None:
    """Log a response body at debug level.

    Args:
        label: What the body is, e.g. "Multistatus"
        body: Raw body
        content_type: Content-Type header value; None means the caller
            expects XML
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    logger.debug(f"--- {label}:")

    if not body:
        logger.debug("  [empty]")
        return

    if content_type is None or _is_xml(content_type):
        for line in format_xml(body).splitlines():
            if line.strip():
                logger.debug(f"  {line}")
        return

    if isinstance(body, str):
        body = body.encode("utf-8")
    preview = body[:PREVIEW_SIZE].decode("utf-8", errors="replace")
    logger.debug(f"  [{len(body)} bytes, {content_type}] {preview}")
    if len(body) > PREVIEW_SIZE:
        logger.debug(f"  ... ({len(body) - PREVIEW_SIZE} more bytes)")


def setup_debug_logging() -> None:
    """Send the package's debug output to stderr.

    Calling it again doesn't add a second handler.
    """
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
