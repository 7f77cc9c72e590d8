#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Initial creation from ingest_cli.py refactoring
# - Contains setup functions for configuration, logging and signal handling
#

"""
cli_setup.py - CLI setup and initialization
===========================================

Handles initialization of configuration, logging and signal handling
for the book-ingest CLI.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from pathlib import Path
from typing import Any, Tuple

from .common_constants import DEFAULT_CONFIG_FILE
from .common_print_utils import safe_print
from .config_manager import ConfigManager


def setup_configuration(argv: list[str] | None = None) -> Tuple[ConfigManager, dict[str, Any]]:
    """Load and validate configuration from config file.

    Returns:
        Tuple of (ConfigManager instance, configuration dictionary)
    """
    # Pre-parse to get config file path
    config_parser = argparse.ArgumentParser(add_help=False)
    config_parser.add_argument("--config", type=str, default=DEFAULT_CONFIG_FILE)
    config_args, _ = config_parser.parse_known_args(argv)

    try:
        config_manager = ConfigManager(config_path=Path(config_args.config))
    except ValueError as e:
        safe_print(f"[bold red]Configuration error: {e}[/bold red]")
        safe_print("Please fix the configuration file or delete it to regenerate defaults.")
        sys.exit(1)
    return config_manager, config_manager.config


def setup_logging(config: dict[str, Any]) -> logging.Logger:
    """Set up logging based on configuration.

    Args:
        config: Configuration dictionary

    Returns:
        Configured logger instance
    """
    log_level = getattr(logging, config["logging"]["level"], logging.INFO)
    log_format = config["logging"]["format"]

    logging.basicConfig(level=log_level, format=log_format)
    logger = logging.getLogger("book_ingest")

    if config["logging"]["file_enabled"]:
        try:
            file_handler = logging.FileHandler(config["logging"]["file_path"])
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(log_format))
            logger.addHandler(file_handler)
        except OSError as e:
            logger.error(f"Failed to set up file logging to {config['logging']['file_path']}: {e}")
            # Continue without file logging

    return logger


def setup_signal_handler(logger: logging.Logger) -> None:
    """Set up signal handling for graceful termination.

    Args:
        logger: Logger instance
    """

    def signal_handler(sig: int, frame: Any) -> None:
        logger.info("Interrupt received. Exiting; the open transaction is not committed.")
        sys.exit(130)

    signal.signal(signal.SIGINT, signal_handler)
