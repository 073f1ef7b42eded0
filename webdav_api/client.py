"""Glue between an HTTP transport and the WebDAV codec."""

from __future__ import annotations

import httpx

from .api import decode_error, decode_multistatus
from .debug import log_body, logger
from .internal.elements import Error, Multistatus
from .internal.internal import DecodeError

# Longest error body kept as a message when it isn't an error document
MAX_ERROR_TEXT = 1024


def error_from_response(resp: httpx.Response) -> Error:
    """Build a WebDAV error from a failed HTTP response.

    The body is decoded as an error document. If that fails the body text
    itself becomes the message.

    Args:
        resp: HTTP response with a non-2xx status

    Returns:
        Error with ``status`` and ``status_code`` filled in from the response
    """
    content_type = resp.headers.get("content-type")
    log_body(f"Error body ({resp.status_code})", resp.content, content_type)

    try:
        err = decode_error(resp.content)
    except DecodeError as e:
        logger.debug(f"error body is not a WebDAV error document: {e}")
        text = resp.text[:MAX_ERROR_TEXT].strip()
        if text and len(resp.text) > MAX_ERROR_TEXT:
            text += " […]"
        err = Error(message=text)

    err.status = f"{resp.status_code} {resp.reason_phrase}".strip()
    err.status_code = resp.status_code
    return err


def read_multistatus(resp: httpx.Response) -> Multistatus:
    """Decode the multistatus body of a PROPFIND or REPORT response.

    Raises:
        Error: If the response status is not 2xx
        DecodeError: If the body can't be decoded
    """
    if resp.status_code // 100 != 2:
        raise error_from_response(resp)

    if resp.status_code != 207:
        logger.debug(f"expected 207 Multi-Status, got {resp.status_code}")

    return decode_multistatus(resp.content)
