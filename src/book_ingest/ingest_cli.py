#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright 2025 Emasoft
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Made ingest_cli.py the entry point of the ingestion pipeline
# - Refactored into smaller modules: cli_parser, cli_setup
#

from __future__ import annotations

import sys

from .book_importer import ingest_book
from .cli_parser import create_parser, default_file_name, validate_args
from .cli_setup import setup_configuration, setup_logging, setup_signal_handler
from .common_print_utils import safe_print
from .errors import IngestionError
from .models import close_database, init_database

APP_NAME = "book-ingest - streaming plain-text book importer"


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the book-ingest CLI."""
    config_manager, config = setup_configuration(argv)

    parser = create_parser(config)
    args = parser.parse_args(argv)
    validate_args(args, parser)

    config = config_manager.update_with_args(args)
    tolog = setup_logging(config)
    setup_signal_handler(tolog)

    file_name = args.name or default_file_name(args.url)
    tolog.info(f"Starting ingestion of {file_name} from {args.url}")

    init_database(config["persistence"]["database_path"])
    try:
        result = ingest_book(
            args.url,
            file_name,
            file_size=args.size,
            owner=args.owner,
            config=config,
        )
    except IngestionError as e:
        tolog.error(f"Ingestion failed ({int(e.code)}): {e.message}")
        safe_print(f"[bold red]{e.message}[/bold red]")
        sys.exit(1)
    finally:
        close_database()

    safe_print(f"[bold green]Stored book {result.book.id}: {result.book.title} ({result.chapter_count} chapters)[/bold green]")


if __name__ == "__main__":
    main()
