"""A Python library for decoding WebDAV responses."""

from .api import decode_error, decode_multistatus, encode_error, encode_multistatus
from .client import error_from_response, read_multistatus
from .internal.elements import Error, Multistatus, Prop, PropValue, Response, Time
from .internal.internal import DecodeError, parse_status, status_ok

__version__ = "0.1.0"

__all__ = [
    "decode_error",
    "decode_multistatus",
    "encode_error",
    "encode_multistatus",
    "error_from_response",
    "read_multistatus",
    "DecodeError",
    "Error",
    "Multistatus",
    "Prop",
    "PropValue",
    "Response",
    "Time",
    "parse_status",
    "status_ok",
]
