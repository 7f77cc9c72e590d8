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
errors.py - Terminal failures of an ingestion run
=================================================

Every fatal condition of the pipeline is reported as a subclass of
IngestionError. Each error carries a ResultCode so callers serving the
result over HTTP can map it to a response without inspecting the type.
"""

from __future__ import annotations

import enum
from typing import Any


class ResultCode(enum.IntEnum):
    """Result codes reported alongside an ingestion outcome."""

    SUCCESS = 200
    BAD_REQUEST = 400
    ERROR = 500


class IngestionError(Exception):
    """Base class for all fatal ingestion failures."""

    code: ResultCode = ResultCode.ERROR
    default_message = "Book ingestion failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def as_dict(self) -> dict[str, Any]:
        """Return the error as a ``{"code", "message"}`` payload."""
        return {"code": int(self.code), "message": self.message}


class SourceUnavailable(IngestionError):
    """The remote file could not be fetched, or its body was absent."""

    code = ResultCode.ERROR
    default_message = "Failed to fetch the source file stream"


class EmptySource(IngestionError):
    """The source produced zero bytes or zero chapters."""

    code = ResultCode.BAD_REQUEST
    default_message = "The source file is empty"


class PersistenceFailure(IngestionError):
    """Writing the book or its chapters failed; nothing was committed."""

    code = ResultCode.ERROR
    default_message = "Failed to store the book"
