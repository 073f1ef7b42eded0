"""Decoding and encoding of WebDAV response bodies."""

from __future__ import annotations

from .debug import log_body, logger
from .internal.elements import Error, Multistatus
from .internal.xml_utils import parse_xml, serialize_xml


def decode_multistatus(data: bytes | str) -> Multistatus:
    """Decode the body of an HTTP 207 Multi-Status response.

    Decoding is all or nothing: no partial result is returned on failure.

    Args:
        data: Raw XML body

    Returns:
        The responses in document order

    Raises:
        DecodeError: If the body is malformed XML or a property can't be
            decoded
    """
    log_body("Multistatus", data)
    root = parse_xml(data)
    ms = Multistatus.from_xml(root)
    logger.debug(f"decoded multistatus with {len(ms.responses)} responses")
    return ms


def encode_multistatus(ms: Multistatus) -> bytes:
    """Encode a multistatus response body."""
    return serialize_xml(ms.to_xml())


def decode_error(data: bytes | str) -> Error:
    """Decode a WebDAV error body.

    The returned error has empty ``status`` and ``status_code``; those come
    from the HTTP response line.

    Raises:
        DecodeError: If the body is malformed XML
    """
    root = parse_xml(data)
    return Error.from_xml(root)


def encode_error(err: Error) -> bytes:
    """Encode a WebDAV error body."""
    return serialize_xml(err.to_xml())
