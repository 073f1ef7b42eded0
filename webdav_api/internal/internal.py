"""Low-level helpers for decoding WebDAV responses."""

from __future__ import annotations

import re

# Parse a status of the form "HTTP/1.1 200 OK"
_STATUS_RE = re.compile(r"^HTTP/[0-9.]+\s+(\d+)\s+(.*)$", re.ASCII)


class DecodeError(ValueError):
    """Failure to turn a WebDAV XML body into structured values.

    The underlying failure (lxml syntax error, bad time text, ...) is kept
    as ``err`` and chained as ``__cause__`` by the raiser.
    """

    def __init__(self, msg: str, err: Exception | None = None):
        self.msg = msg
        self.err = err
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.err:
            return f"webdav: {self.msg}: {self.err}"
        return f"webdav: {self.msg}"


def parse_status(s: str | None) -> int | None:
    """Parse an HTTP status line.

    Args:
        s: Status line such as "HTTP/1.1 207 Multi-Status"

    Returns:
        The numeric status code, or None if the line is malformed
    """
    if not s:
        return None
    match = _STATUS_RE.fullmatch(s)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def status_ok(s: str | None) -> bool:
    """Check if a status line reports success (2xx).

    Malformed status lines are reported as not OK rather than raising.
    """
    code = parse_status(s)
    if code is None:
        return False
    return 200 <= code < 300
