#!/usr/bin/env python3
"""Search the web using the Brave Search API."""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from pathlib import Path

from loguru import logger

from bravesearch import __version__
from bravesearch.config.loader import load_config
from bravesearch.config.schema import API_KEY_ENV, DEFAULT_COUNT
from bravesearch.search.client import BraveSearchClient
from bravesearch.search.errors import BraveSearchError, MissingCredential
from bravesearch.search.output import emit
from bravesearch.utils.redaction import SecretRedactor

MAX_COUNT = 2**32 - 1


def parse_count(raw: str | None, default: int = DEFAULT_COUNT) -> int:
    """Parse the result count, falling back to the default on bad input."""
    if raw is None:
        return default
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        logger.debug("Invalid count {!r}, using {}", raw, default)
        return default
    value = int(text)
    if not 1 <= value <= MAX_COUNT:
        logger.debug("Count {} out of range, using {}", value, default)
        return default
    return value


def get_api_key(environ: dict[str, str] | None = None) -> str:
    env = os.environ if environ is None else environ
    api_key = env.get(API_KEY_ENV, "")
    if not api_key:
        raise MissingCredential(API_KEY_ENV)
    return api_key


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bravesearch", description=__doc__)
    parser.add_argument(
        "-q", "--query", required=True, metavar="QUERY", help="The query to search for"
    )
    parser.add_argument(
        "-c",
        "--count",
        default=None,
        metavar="COUNT",
        help=f"Number of results to retrieve (default: {DEFAULT_COUNT})",
    )
    parser.add_argument(
        "--timeout", type=float, default=None, metavar="SECONDS", help="Request timeout"
    )
    parser.add_argument(
        "--config", type=Path, default=None, metavar="PATH", help="Path to config file"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(verbose: bool, redactor: SecretRedactor | None = None) -> None:
    logger.remove()
    logger.configure(patcher=redactor.patch_record if redactor else None)
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        api_key = get_api_key()
    except MissingCredential as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    redactor = SecretRedactor([api_key])
    setup_logging(args.verbose, redactor)

    config = load_config(args.config)
    if args.timeout is not None and args.timeout > 0:
        config.timeout = args.timeout
    count = parse_count(args.count, config.default_count)

    client = BraveSearchClient(config)
    try:
        results = asyncio.run(client.search(query=args.query, count=count, api_key=api_key))
    except BraveSearchError as e:
        logger.debug("Search failed: {}", repr(e))
        print(f"Error: {redactor.redact(str(e))}", file=sys.stderr)
        return 1

    emit(results, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
