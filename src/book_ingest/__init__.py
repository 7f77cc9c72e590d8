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
book_ingest - Streaming plain-text book ingestion

Downloads a remote book file chunk by chunk, detects its encoding, splits
it into chapters and stores the book and its chapters in one transaction.
"""

__version__ = "1.0.0"
__author__ = "Emasoft"
__email__ = "713559+Emasoft@users.noreply.github.com"
__license__ = "Apache-2.0"

from .book_importer import IngestionResult, ingest_book, parse_remote_book
from .errors import EmptySource, IngestionError, PersistenceFailure, ResultCode, SourceUnavailable

__all__ = [
    "IngestionResult",
    "ingest_book",
    "parse_remote_book",
    "IngestionError",
    "SourceUnavailable",
    "EmptySource",
    "PersistenceFailure",
    "ResultCode",
]
