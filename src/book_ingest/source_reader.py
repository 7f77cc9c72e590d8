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
source_reader.py - Streaming download of the remote book file
=============================================================

Pulls the raw bytes of a remote file as a sequence of RawChunk values
without buffering the whole body. Parsing is left to the later stages.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import TracebackType
from typing import Iterator, Optional

import requests

from .common_constants import DEFAULT_CHUNK_SIZE
from .errors import SourceUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawChunk:
    """An immutable byte buffer and its position in the source stream."""

    data: bytes
    position: int


class SourceReader:
    """
    Streaming handle on a remote file.

    Use as a context manager so the connection is released on success,
    error or cancellation alike::

        with SourceReader(url) as reader:
            for chunk in reader.iter_chunks():
                ...
    """

    def __init__(
        self,
        url: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if timeout is not None and (
            isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0
        ):
            raise ValueError(f"timeout must be None or a positive number of seconds, got {timeout!r}")
        self.url = url
        self.chunk_size = chunk_size
        self.timeout = timeout
        self.session = session
        self._response: Optional[requests.Response] = None

    def open(self) -> SourceReader:
        """
        Issue the GET request and check that a body is available.

        Raises:
            SourceUnavailable: On transport errors, non-success status or a missing body
        """
        logger.info(f"Streaming file from: {self.url}")
        getter = self.session.get if self.session is not None else requests.get
        try:
            response = getter(self.url, stream=True, timeout=self.timeout)
        except requests.RequestException as e:
            raise SourceUnavailable(f"Failed to fetch {self.url}: {e}") from e

        self._response = response
        if not response.ok or response.raw is None:
            logger.error(f"Fetch failed: {response.status_code} {response.reason}")
            self.close()
            raise SourceUnavailable(f"Failed to fetch {self.url}: HTTP {response.status_code}")
        return self

    def iter_chunks(self) -> Iterator[RawChunk]:
        """
        Yield the body as RawChunks in stream order.

        Raises:
            SourceUnavailable: If the connection breaks while streaming
        """
        if self._response is None:
            self.open()
        assert self._response is not None

        position = 0
        try:
            for data in self._response.iter_content(chunk_size=self.chunk_size):
                # iter_content may hand out empty keep-alive chunks
                if not data:
                    continue
                yield RawChunk(data=bytes(data), position=position)
                position += 1
        except requests.RequestException as e:
            raise SourceUnavailable(f"Stream from {self.url} broke after {position} chunks: {e}") from e
        logger.debug(f"Source stream ended after {position} chunks")

    def close(self) -> None:
        """Release the underlying connection. Safe to call more than once."""
        if self._response is not None:
            self._response.close()
            self._response = None

    def __enter__(self) -> SourceReader:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
