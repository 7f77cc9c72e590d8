#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright (c) 2025 Emasoft
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
#
# CHANGELOG:
# - Replaced local-file import with the streaming remote ingestion pipeline
# - Chapters are segmented line by line instead of split by size
# - Book and chapters are committed in a single transaction
#

"""Book import pipeline: remote stream -> chapters -> database."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests
from peewee import Database

from .chapter_segmenter import ParsedChapter, segment_lines
from .charset_detector import detect
from .common_constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_ENCODING,
    FRONT_MATTER_TITLE,
    MIN_ENCODING_CONFIDENCE,
)
from .errors import EmptySource
from .line_splitter import iter_lines
from .models import Book
from .persistence_batcher import BookMetadata, persist_book
from .source_reader import SourceReader
from .stream_decoder import decode_stream, prepend_chunk

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IngestionResult:
    """Outcome of a successful run."""

    book: Book
    chapter_count: int


def _setting(config: Optional[dict[str, Any]], section: str, key: str, default: Any) -> Any:
    if not config:
        return default
    value = (config.get(section) or {}).get(key)
    return default if value is None else value


def parse_remote_book(
    file_url: str,
    config: Optional[dict[str, Any]] = None,
    session: requests.Session | None = None,
) -> list[ParsedChapter]:
    """
    Stream a remote text file and segment it into chapters.

    The first chunk is used as the charset sample and then spliced back in
    front of the rest of the stream before decoding.

    Raises:
        SourceUnavailable: If the file cannot be fetched
        EmptySource: If the file has no bytes or yields no chapters
    """
    reader = SourceReader(
        file_url,
        chunk_size=_setting(config, "source", "chunk_size", DEFAULT_CHUNK_SIZE),
        timeout=_setting(config, "source", "timeout", None),
        session=session,
    )
    with reader:
        chunks = reader.iter_chunks()
        first_chunk = next(chunks, None)
        if first_chunk is None:
            raise EmptySource("The source file is empty")

        encoding = detect(
            first_chunk.data,
            min_confidence=_setting(config, "encoding", "min_confidence", MIN_ENCODING_CONFIDENCE),
            default=_setting(config, "encoding", "default", DEFAULT_ENCODING),
        )
        text = decode_stream(prepend_chunk(first_chunk, chunks), encoding.name)
        front_matter_title = _setting(config, "segmentation", "front_matter_title", FRONT_MATTER_TITLE)
        chapters = list(segment_lines(iter_lines(text), front_matter_title))

    if not chapters:
        raise EmptySource("No chapters could be parsed from the source file")
    return chapters


def ingest_book(
    file_url: str,
    file_name: str,
    file_size: int | None = None,
    owner: str | None = None,
    config: Optional[dict[str, Any]] = None,
    database: Database | None = None,
    session: requests.Session | None = None,
) -> IngestionResult:
    """
    Run the whole ingestion pipeline for one uploaded file.

    Args:
        file_url: URL the file can be fetched from
        file_name: Original filename; gives the book title and format
        file_size: Declared size in bytes, if known
        owner: Uploader id
        config: Configuration dictionary (defaults used when None)
        database: Database to write to (defaults to the bound proxy)
        session: Optional requests session for the download

    Returns:
        IngestionResult with the stored Book and its chapter count

    Raises:
        SourceUnavailable, EmptySource, PersistenceFailure
    """
    logger.debug(f" -> ingest_book({file_name!r})")
    chapters = parse_remote_book(file_url, config=config, session=session)
    logger.info(f"Parsed {len(chapters)} chapters from {file_name!r}")

    metadata = BookMetadata.from_upload(file_url, file_name, file_size=file_size, owner=owner)
    book = persist_book(
        metadata,
        chapters,
        batch_size=_setting(config, "persistence", "batch_size", DEFAULT_BATCH_SIZE),
        database=database,
    )
    return IngestionResult(book=book, chapter_count=len(chapters))
