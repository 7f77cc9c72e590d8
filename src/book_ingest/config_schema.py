#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Replaced translation presets with the ingestion pipeline sections
# - Defaults are taken from common_constants so code and template agree
#

"""
config_schema.py - Configuration schema and default template for book_ingest
"""

from .common_constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_DATABASE_PATH,
    DEFAULT_ENCODING,
    FRONT_MATTER_TITLE,
    MIN_ENCODING_CONFIDENCE,
)

# Section name -> description, used when reporting a missing section
REQUIRED_SECTIONS = {
    "source": "Remote file download settings",
    "encoding": "Charset detection settings",
    "segmentation": "Chapter segmentation settings",
    "persistence": "Database settings",
    "logging": "Logging configuration",
}

# Default configuration template with extensive comments
DEFAULT_CONFIG_TEMPLATE = f"""# book_ingest Configuration File
# ==============================
# This file contains default settings for the book ingestion pipeline.
# Any command-line arguments will override these settings.

# Source Download Settings
# ------------------------
source:
  # Bytes requested per read from the response body (default: {DEFAULT_CHUNK_SIZE})
  chunk_size: {DEFAULT_CHUNK_SIZE}
  # Network timeout in seconds, null for no timeout (default: null)
  timeout: null

# Charset Detection Settings
# --------------------------
encoding:
  # Encoding used when detection is inconclusive (default: {DEFAULT_ENCODING})
  default: "{DEFAULT_ENCODING}"
  # Detector results below this confidence use the default (default: {MIN_ENCODING_CONFIDENCE})
  min_confidence: {MIN_ENCODING_CONFIDENCE}

# Chapter Segmentation Settings
# -----------------------------
segmentation:
  # Title given to the text before the first chapter marker
  front_matter_title: "{FRONT_MATTER_TITLE}"

# Database Settings
# -----------------
persistence:
  # SQLite database file (use ":memory:" for a throwaway database)
  database_path: "{DEFAULT_DATABASE_PATH}"
  # Chapter rows written per INSERT statement (default: {DEFAULT_BATCH_SIZE})
  batch_size: {DEFAULT_BATCH_SIZE}

# Logging Settings
# ----------------
logging:
  # Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
  level: INFO

  # Log to file (default: false)
  file_enabled: false
  file_path: "book_ingest.log"

  # Log format
  format: "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
"""
