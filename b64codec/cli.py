"""Command line interface for b64codec."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO

import structlog

from b64codec.base64 import Base64
from b64codec.decoder import Decoder
from b64codec.encoder import Encoder
from b64codec.exceptions import Base64Error


def _configure_logger(verbose: bool):
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.INFO),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
    return structlog.get_logger()


def _separator(value: str) -> bytes:
    return value.encode("latin-1").decode("unicode_escape").encode("latin-1")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="b64codec", description="Base64 encoder and decoder (RFC 4648 / RFC 2045)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug events to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode a file (or stdin) to Base64")
    decode_parser = subparsers.add_parser("decode", help="Decode Base64 from a file (or stdin)")

    for sub in (encode_parser, decode_parser):
        sub.add_argument("input", nargs="?", default="-", help="Input file, '-' for stdin")
        variant = sub.add_mutually_exclusive_group()
        variant.add_argument("--url", action="store_true", help="Use the URL and Filename safe alphabet")
        variant.add_argument("--mime", action="store_true", help="Use MIME framing")

    encode_parser.add_argument("--no-padding", action="store_true", help="Omit trailing '=' characters")
    encode_parser.add_argument("--line-length", type=int, help="MIME line length (implies --mime)")
    encode_parser.add_argument(
        "--line-separator",
        type=_separator,
        help="MIME line separator, backslash escapes allowed (implies --mime)",
    )
    return parser


def _select_encoder(args: argparse.Namespace) -> Encoder:
    if args.url:
        encoder = Base64.get_url_encoder()
    elif args.mime or args.line_length is not None or args.line_separator is not None:
        encoder = Base64.get_mime_encoder(args.line_length, args.line_separator)
    else:
        encoder = Base64.get_encoder()
    if args.no_padding:
        encoder = encoder.without_padding()
    return encoder


def _select_decoder(args: argparse.Namespace) -> Decoder:
    if args.url:
        return Base64.get_url_decoder()
    if args.mime:
        return Base64.get_mime_decoder()
    return Base64.get_decoder()


def _read_input(path: str, stdin: BinaryIO) -> bytes:
    if path == "-":
        return stdin.read()
    with open(path, "rb") as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "encode" and args.url and (args.line_length is not None or args.line_separator is not None):
        parser.error("--url cannot be combined with --line-length or --line-separator")
    logger = _configure_logger(args.verbose)

    try:
        data = _read_input(args.input, sys.stdin.buffer)
    except OSError as e:
        logger.error("read_failed", path=args.input, error=str(e))
        return 1

    try:
        if args.command == "encode":
            encoder = _select_encoder(args)
            logger.debug("encoding", config=repr(encoder.config), size=len(data))
            result = encoder.encode(data) + b"\n"
        else:
            decoder = _select_decoder(args)
            # a trailing newline from the shell is not part of the payload
            if not decoder.config.mime:
                data = data.rstrip(b"\r\n")
            logger.debug("decoding", config=repr(decoder.config), size=len(data))
            result = decoder.decode(data)
    except Base64Error as e:
        logger.error("codec_error", command=args.command, error=str(e), error_type=type(e).__name__)
        return 2

    sys.stdout.buffer.write(result)
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
