"""WebDAV response decoding command-line tool."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from webdav_api.api import decode_error, decode_multistatus, encode_error, encode_multistatus
from webdav_api.debug import setup_debug_logging
from webdav_api.internal.elements import Response
from webdav_api.internal.internal import DecodeError


def format_response(resp: Response) -> str:
    """Format one response as a listing line."""
    props = resp.props
    kind = "d" if props.is_collection else "-"
    modified = props.modified.to_string() if props.modified is not None else "-"
    ok = "ok" if props.status_ok() else "failed"
    line = f"{kind} {props.size:>12} {modified:<29} {ok:<6} {resp.href}"
    if props.name:
        line += f" ({props.name})"
    return line


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the decoder."""
    parser = argparse.ArgumentParser(
        description="Decode WebDAV response bodies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List the resources of a captured PROPFIND response
  webdav-decode propfind.xml

  # Show the message of an error body read from stdin
  curl -s -X PROPFIND https://dav.example.com/missing | webdav-decode --error -
        """,
    )
    parser.add_argument(
        "--error",
        action="store_true",
        help="decode the body as an error document instead of a multistatus",
    )
    parser.add_argument(
        "--encode",
        action="store_true",
        help="print the decoded body encoded back to XML",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="enable debug logging (logs bodies with formatted XML)",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="file holding the response body, - for stdin (default: -)",
    )

    args = parser.parse_args(argv)

    if args.debug:
        setup_debug_logging()

    if args.file == "-":
        data = sys.stdin.buffer.read()
    else:
        path = Path(args.file)
        if not path.is_file():
            print(f"Error: file does not exist: {path}", file=sys.stderr)
            return 1
        data = path.read_bytes()

    try:
        if args.error:
            err = decode_error(data)
            if args.encode:
                print(encode_error(err).decode("utf-8"))
            else:
                print(err)
        else:
            ms = decode_multistatus(data)
            if args.encode:
                print(encode_multistatus(ms).decode("utf-8"))
            else:
                for resp in ms.responses:
                    print(format_response(resp))
    except DecodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
