#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created new module to handle configuration validation
# - Checks unknown keys, missing sections and numeric pipeline settings
# - source.timeout must be null or a positive number
#

"""
config_validator.py - Configuration validation utilities for book_ingest
"""

import logging
from typing import Any

from .config_schema import REQUIRED_SECTIONS

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidator:
    """Validates configuration structure and values."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def validate_config_first_error(self, config: dict[str, Any], defaults: dict[str, Any]) -> dict[str, Any] | None:
        """
        Validate configuration and return only the FIRST error found.

        Args:
            config: Configuration to validate
            defaults: Default configuration for reference

        Returns:
            First error found or None if valid
        """
        valid_top_keys = set(defaults.keys())
        for key in config.keys():
            if key not in valid_top_keys:
                return {
                    "type": "unknown_key",
                    "key": key,
                    "message": f"Unknown or malformed key '{key}' found.",
                }

        for section, description in REQUIRED_SECTIONS.items():
            if section not in config:
                return {
                    "type": "missing_section",
                    "section": section,
                    "message": f"Expected section '{section}' ({description}) not found.",
                }
            if not isinstance(config[section], dict):
                return {
                    "type": "invalid_section",
                    "section": section,
                    "message": f"Section '{section}' must be a mapping.",
                }

        for path in ("source.chunk_size", "persistence.batch_size"):
            section, key = path.split(".")
            value = config[section].get(key)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                return {
                    "type": "invalid_value",
                    "path": path,
                    "value": value,
                    "message": f"Invalid value '{value}' for {path}. Must be a positive integer",
                }

        # None means wait indefinitely
        timeout = config["source"].get("timeout")
        if timeout is not None and (
            not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout <= 0
        ):
            return {
                "type": "invalid_value",
                "path": "source.timeout",
                "value": timeout,
                "message": f"Invalid value '{timeout}' for source.timeout. Must be null or a positive number of seconds",
            }

        confidence = config["encoding"].get("min_confidence")
        if not isinstance(confidence, (int, float)) or not 0.0 <= confidence <= 1.0:
            return {
                "type": "invalid_value",
                "path": "encoding.min_confidence",
                "value": confidence,
                "message": f"Invalid value '{confidence}' for encoding.min_confidence. Must be between 0 and 1",
            }

        level = config["logging"].get("level")
        if level not in VALID_LOG_LEVELS:
            return {
                "type": "invalid_value",
                "path": "logging.level",
                "value": level,
                "valid_values": VALID_LOG_LEVELS,
                "message": f"Invalid value '{level}' for logging.level. Must be one of {', '.join(VALID_LOG_LEVELS)}",
            }

        return None
