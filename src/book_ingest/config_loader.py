#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Reads the YAML file directly and knows the pipeline's section layout
# - Sections left empty in the file count as empty mappings
# - Defaults are merged section by section; unknown keys are left for the validator
#

"""
config_loader.py - Reading book_ingest_config.yml and filling in defaults
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from .config_schema import DEFAULT_CONFIG_TEMPLATE, REQUIRED_SECTIONS


class ConfigLoader:
    """Reads the configuration file and completes it with the template defaults."""

    def __init__(self, config_path: Path, logger: logging.Logger | None = None):
        self.config_path = Path(config_path)
        self.logger = logger or logging.getLogger(__name__)

    def load_config(self) -> dict[str, Any]:
        """
        Load the configuration file, writing the default template first if it is missing.

        Returns:
            The sections found in the file, or the defaults for an empty file

        Raises:
            ValueError: If the file cannot be read or is not a mapping of sections
        """
        if not self.config_path.exists():
            self.logger.info(f"Configuration file not found. Creating default at: {self.config_path}")
            self._create_default_config()

        config = self.read_sections()
        if not config:
            self.logger.warning("Configuration file is empty. Using defaults.")
            return self.get_default_config()
        return config

    def read_sections(self) -> dict[str, Any]:
        """
        Parse the file into a section dictionary.

        A pipeline section written with no keys (``persistence:`` alone on a
        line) loads as None in YAML and is returned as an empty mapping.
        """
        try:
            data = yaml.safe_load(self.config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"{self.config_path} is not valid YAML: {e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read configuration file {self.config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(
                f"{self.config_path} must map section names ({', '.join(REQUIRED_SECTIONS)}) to settings, "
                f"got {type(data).__name__}"
            )

        return {name: {} if name in REQUIRED_SECTIONS and value is None else value for name, value in data.items()}

    def _create_default_config(self) -> None:
        try:
            self.config_path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
            self.logger.info("Default configuration file created successfully.")
        except OSError as e:
            self.logger.error(f"Failed to create configuration file: {e}")
            raise

    def get_default_config(self) -> dict[str, Any]:
        """Default configuration, parsed from the commented template."""
        return yaml.safe_load(DEFAULT_CONFIG_TEMPLATE)

    def merge_with_defaults(self, config: dict[str, Any]) -> dict[str, Any]:
        """
        Fill in every setting the user left out.

        Keys of a pipeline section override the defaults of that section one
        by one. Anything else (unknown keys, sections that are not mappings)
        is copied as is so the validator can report it.
        """
        merged = self.get_default_config()
        for name, value in config.items():
            if name in REQUIRED_SECTIONS and isinstance(value, dict):
                merged[name] = {**merged[name], **value}
            else:
                merged[name] = value
        return merged
