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
persistence_batcher.py - Transactional storage of a parsed book
===============================================================

The book row and all of its chapter rows are written inside a single
transaction. Chapters go in fixed-size batches. If any insert fails the
whole transaction is rolled back, so a Book never exists without its
chapters.
"""

from __future__ import annotations

import logging
import re
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from peewee import Database, PeeweeException, chunked

from .chapter_segmenter import ParsedChapter
from .common_constants import DEFAULT_AUTHOR, DEFAULT_BATCH_SIZE, DEFAULT_FORMAT
from .errors import PersistenceFailure
from .models import Book, Chapter, database_proxy

logger = logging.getLogger(__name__)

EXTENSION_RE = re.compile(r"\.([^/.]+)$")


@dataclass(frozen=True)
class BookMetadata:
    """Column values of the Book row, derived from the upload request."""

    title: str
    format: str
    file_url: str
    size: int = 0
    owner: Optional[str] = None
    author: str = DEFAULT_AUTHOR

    @classmethod
    def from_upload(
        cls,
        file_url: str,
        file_name: str,
        file_size: int | None = None,
        owner: str | None = None,
    ) -> BookMetadata:
        """
        Derive book metadata from the upload parameters.

        The title is the filename without its last extension, the format is
        that extension lower-cased, and the stored URL drops its query string
        (signed URLs carry short-lived credentials there).
        """
        match = EXTENSION_RE.search(file_name)
        return cls(
            title=EXTENSION_RE.sub("", file_name),
            format=match.group(1).lower() if match else DEFAULT_FORMAT,
            file_url=file_url.split("?")[0],
            size=file_size or 0,
            owner=owner,
        )


def chapter_rows(book_id: int, chapters: Sequence[ParsedChapter]) -> list[dict[str, Any]]:
    """Build insert rows for ``chapters``, keeping their order_index."""
    return [
        {
            "book": book_id,
            "title": chapter.title,
            "content": chapter.content,
            "order_index": chapter.order_index,
            "word_count": chapter.word_count,
        }
        for chapter in chapters
    ]


def persist_book(
    metadata: BookMetadata,
    chapters: Sequence[ParsedChapter],
    batch_size: int = DEFAULT_BATCH_SIZE,
    database: Database | None = None,
) -> Book:
    """
    Insert the book and its chapters in one transaction.

    Args:
        metadata: Book column values
        chapters: Parsed chapters in order
        batch_size: Chapter rows per INSERT statement
        database: Database to use (defaults to the bound proxy)

    Returns:
        The created Book

    Raises:
        PersistenceFailure: If any insert fails; nothing is committed
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")

    # Models stay bound to an explicit database for the whole transaction
    if database is None:
        db, binding = database_proxy, nullcontext()
    else:
        db, binding = database, database.bind_ctx([Book, Chapter])
    try:
        with binding, db.atomic():
            book = Book.create(
                owner=metadata.owner,
                title=metadata.title,
                author=metadata.author,
                file_url=metadata.file_url,
                format=metadata.format,
                size=metadata.size,
            )
            rows = chapter_rows(book.id, chapters)
            for batch_number, batch in enumerate(chunked(rows, batch_size), start=1):
                Chapter.insert_many(batch).execute()
                logger.debug(f"Inserted chapter batch {batch_number} ({len(batch)} rows) for book {book.id}")
    except PeeweeException as e:
        logger.error(f"Storing book {metadata.title!r} failed, transaction rolled back: {e}")
        raise PersistenceFailure(f"Failed to store book {metadata.title!r}: {e}") from e

    logger.info(f"Stored book {book.id} ({metadata.title!r}) with {len(chapters)} chapters")
    return book
