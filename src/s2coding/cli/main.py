"""Main CLI entry point for s2coding."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .. import __version__
from ..codec.fixed import decode_uint, encode_uint
from ..codec.varint import decode_varint64, encode_varint64
from ..codec.zigzag import encode_zigzag32, encode_zigzag64
from ..exceptions import S2CodingError

log = logging.getLogger(__name__)

HANDLER_NAME = "s2coding-cli"


def init_logging(verbose: bool) -> None:
    """Configure root logging for the command line tool.

    Repeated calls replace the handler installed by the previous call, so
    ``main()`` can run more than once in the same process.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for old in [h for h in logger.handlers if h.get_name() == HANDLER_NAME]:
        logger.removeHandler(old)
        old.close()

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    logger.addHandler(handler)


def _parse_int(text: str) -> int:
    """Parse a decimal or 0x-prefixed integer."""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None


def _parse_hex(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hex string: {text!r}") from None


def _run(args: argparse.Namespace) -> str | None:
    """Execute the requested operation and return the line to print."""
    if args.varint is not None:
        return encode_varint64(args.varint).hex()
    if args.decode_varint is not None:
        value, _ = decode_varint64(args.decode_varint)
        return str(value)
    if args.zigzag32 is not None:
        return str(encode_zigzag32(args.zigzag32))
    if args.zigzag64 is not None:
        return str(encode_zigzag64(args.zigzag64))
    if args.fixed is not None:
        return encode_uint(args.fixed, args.width).hex()
    if args.decode_fixed is not None:
        value, _ = decode_uint(args.decode_fixed, args.width)
        return str(value)
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the s2coding CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="s2coding",
        description="s2coding: Integer codecs for compact geometry persistence",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  s2coding --varint 300                  Encode 300 as a varint (ac02)
  s2coding --decode-varint ac02          Decode a hex varint
  s2coding --zigzag64 -2                 ZigZag-map a signed value (3)
  s2coding --fixed 0x0102 --width 2      Fixed-width little-endian (0201)
  s2coding --decode-fixed 0201 --width 2 Decode fixed-width bytes
        """,
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument("--varint", metavar="N", type=_parse_int, help="Encode N as a varint")
    group.add_argument(
        "--decode-varint", metavar="HEX", type=_parse_hex, help="Decode a hex-encoded varint"
    )
    group.add_argument("--zigzag32", metavar="N", type=_parse_int, help="ZigZag-map a 32-bit value")
    group.add_argument("--zigzag64", metavar="N", type=_parse_int, help="ZigZag-map a 64-bit value")
    group.add_argument(
        "--fixed", metavar="N", type=_parse_int, help="Encode N as fixed-width little-endian"
    )
    group.add_argument(
        "--decode-fixed", metavar="HEX", type=_parse_hex, help="Decode hex fixed-width bytes"
    )

    parser.add_argument(
        "--width",
        metavar="W",
        type=int,
        default=8,
        help="Word width in bytes for --fixed/--decode-fixed (default: 8)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"s2coding {__version__}",
    )

    args = parser.parse_args(argv)
    init_logging(args.verbose)

    try:
        output = _run(args)
    except S2CodingError as e:
        log.debug("Operation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    if output is None:
        parser.print_help()
        return 0

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
