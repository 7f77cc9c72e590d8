#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Main config_manager.py acts as orchestrator over loader and validator
# - Dropped presets; command-line overrides map onto pipeline sections
#

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

"""
config_manager.py - Configuration management for book_ingest
"""

import argparse
import logging
from pathlib import Path
from typing import Any

from .common_constants import DEFAULT_CONFIG_FILE
from .config_loader import ConfigLoader
from .config_validator import ConfigValidator

# Command-line argument -> configuration key path
ARG_OVERRIDES = {
    "database": "persistence.database_path",
    "batch_size": "persistence.batch_size",
    "chunk_size": "source.chunk_size",
}


class ConfigManager:
    """Manages configuration for the ingestion pipeline."""

    def __init__(
        self,
        config_path: Path | None = None,
        logger: logging.Logger | None = None,
    ):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to configuration file (default: book_ingest_config.yml)
            logger: Logger instance

        Raises:
            ValueError: If the configuration file is malformed or invalid
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config_path = config_path or Path(DEFAULT_CONFIG_FILE)

        self.loader = ConfigLoader(self.config_path, self.logger)
        self.validator = ConfigValidator(self.logger)

        self.config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """Load, merge and validate the configuration."""
        config = self.loader.merge_with_defaults(self.loader.load_config())

        first_error = self.validator.validate_config_first_error(config, self.loader.get_default_config())
        if first_error:
            raise ValueError(f"{self.config_path}: {first_error['message']}")

        return config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key_path: Dot-separated path (e.g., 'persistence.batch_size')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value: Any = self.config
        for key in key_path.split("."):
            if not isinstance(value, dict) or key not in value:
                return default
            value = value[key]
        return value

    def update_with_args(self, args: argparse.Namespace) -> dict[str, Any]:
        """
        Apply command-line overrides on top of the loaded configuration.

        Arguments left as None do not override anything.

        Returns:
            The updated configuration dictionary
        """
        for arg_name, key_path in ARG_OVERRIDES.items():
            value = getattr(args, arg_name, None)
            if value is None:
                continue
            section, key = key_path.split(".")
            self.config[section][key] = value
            self.logger.debug(f"Config override from command line: {key_path} = {value}")

        if getattr(args, "verbose", False):
            self.config["logging"]["level"] = "DEBUG"

        return self.config
