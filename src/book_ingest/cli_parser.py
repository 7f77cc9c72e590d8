#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Initial creation from ingest_cli.py refactoring
# - Contains argument parser creation and validation
#

"""
cli_parser.py - Command-line argument parsing for book-ingest
=============================================================
"""

from __future__ import annotations

import argparse
from typing import Any

from .common_constants import DEFAULT_CONFIG_FILE


def create_parser(config: dict[str, Any] | None = None) -> argparse.ArgumentParser:
    """Create the argument parser.

    Args:
        config: Loaded configuration, used to show current defaults in help

    Returns:
        Configured ArgumentParser
    """
    persistence = (config or {}).get("persistence", {})
    parser = argparse.ArgumentParser(
        prog="book-ingest",
        description="Stream a remote plain-text book, split it into chapters and store it.",
    )
    parser.add_argument("url", help="URL of the book file")
    parser.add_argument("--name", help="Original filename (default: last path segment of the URL)")
    parser.add_argument("--size", type=int, help="Declared file size in bytes")
    parser.add_argument("--owner", help="Uploader id stored with the book")
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE, help="Configuration file (default: %(default)s)")
    parser.add_argument(
        "--database",
        help=f"SQLite database file (config: {persistence.get('database_path', 'n/a')})",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        help=f"Chapter rows per insert (config: {persistence.get('batch_size', 'n/a')})",
    )
    parser.add_argument("--chunk-size", type=int, help="Bytes per network read")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def validate_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Validate parsed arguments, exiting through the parser on error."""
    if not args.url.lower().startswith(("http://", "https://")):
        parser.error(f"url must be an http(s) URL, got: {args.url}")
    for name in ("size", "batch_size", "chunk_size"):
        value = getattr(args, name)
        if value is not None and value < (0 if name == "size" else 1):
            parser.error(f"--{name.replace('_', '-')} must be {'non-negative' if name == 'size' else 'positive'}")


def default_file_name(url: str) -> str:
    """Return the last path segment of ``url``, without query or fragment."""
    path = url.split("?")[0].split("#")[0].rstrip("/")
    return path.rsplit("/", 1)[-1] or "book.txt"
