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

"""
Common constants used across the ingestion pipeline.

This module centralizes shared defaults so the pipeline stages, the
configuration template and the CLI agree on the same values.
"""

# Network streaming
DEFAULT_CHUNK_SIZE = 64 * 1024  # bytes requested per read from the response body

# File encoding defaults
DEFAULT_ENCODING = "UTF-8"
SUPERSET_ENCODING = "GB18030"
# Aliases that are decoded with SUPERSET_ENCODING instead (compared upper-cased)
GBK_FAMILY_ALIASES = {"GB2312", "GBK"}
# Aliases that are decoded with DEFAULT_ENCODING instead (compared upper-cased)
UTF8_SUBSET_ALIASES = {"ASCII"}

# Confidence below which the detector falls back to DEFAULT_ENCODING
MIN_ENCODING_CONFIDENCE = 0.1

# Chapter segmentation
FRONT_MATTER_TITLE = "序章/前言"

# Persistence
DEFAULT_BATCH_SIZE = 50
DEFAULT_DATABASE_PATH = "books.db"
DEFAULT_AUTHOR = "Unknown"
DEFAULT_FORMAT = "txt"

# Book status values
BOOK_STATUS_ACTIVE = 1
BOOK_STATUS_DELETED = 0

# Configuration
DEFAULT_CONFIG_FILE = "book_ingest_config.yml"
