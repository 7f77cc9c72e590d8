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
# - Replaced the in-memory dictionaries with peewee models
# - Added Book and Chapter tables with cascade delete
# - Added init_database / close_database / load_chapters
#

"""Database models for stored books and their chapters."""

from __future__ import annotations

import logging
from datetime import datetime

from peewee import (
    AutoField,
    Check,
    DatabaseProxy,
    DateTimeField,
    ForeignKeyField,
    IntegerField,
    Model,
    TextField,
)
from playhouse.sqlite_ext import SqliteExtDatabase

from .common_constants import BOOK_STATUS_ACTIVE, DEFAULT_AUTHOR

logger = logging.getLogger(__name__)

# Bound to a concrete database by init_database()
database_proxy = DatabaseProxy()


class BaseModel(Model):
    """Base model with common configuration"""

    class Meta:
        database = database_proxy


class Book(BaseModel):
    """An ingested book. Owns its chapters."""

    id = AutoField()
    owner = TextField(null=True)  # uploader id, issued by the external auth layer
    title = TextField()
    author = TextField(default=DEFAULT_AUTHOR)
    cover_url = TextField(null=True)
    file_url = TextField(null=True)
    format = TextField()
    size = IntegerField(default=0)
    created_at = DateTimeField(default=datetime.now)
    status = IntegerField(default=BOOK_STATUS_ACTIVE)  # 1: active, 0: deleted
    deleted_at = DateTimeField(null=True)

    class Meta:
        table_name = "books"


class Chapter(BaseModel):
    """One parsed chapter of a book."""

    id = AutoField()
    book = ForeignKeyField(Book, backref="chapters", column_name="book_id", on_delete="CASCADE", index=True)
    title = TextField()
    content = TextField()
    order_index = IntegerField(constraints=[Check("order_index > 0")])
    word_count = IntegerField(null=True)

    class Meta:
        table_name = "chapters"


def init_database(path: str = ":memory:") -> SqliteExtDatabase:
    """
    Open the SQLite database at ``path``, bind the models and create tables.

    Args:
        path: Database file, or ``:memory:``

    Returns:
        The connected database
    """
    db = SqliteExtDatabase(
        path,
        pragmas={
            "journal_mode": "memory" if path == ":memory:" else "wal",
            "foreign_keys": 1,  # required for ON DELETE CASCADE
        },
    )
    database_proxy.initialize(db)
    db.connect(reuse_if_open=True)
    db.create_tables([Book, Chapter], safe=True)
    logger.debug(f"Database ready at {path}")
    return db


def close_database() -> None:
    """Close database connection"""
    db = database_proxy.obj
    if db is not None and not db.is_closed():
        db.close()


def load_chapters(book_id: int) -> list[Chapter]:
    """Return the chapters of a book ordered by order_index."""
    return list(Chapter.select().where(Chapter.book == book_id).order_by(Chapter.order_index))
