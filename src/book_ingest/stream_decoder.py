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
stream_decoder.py - Byte stream to text stream
==============================================

The first chunk is consumed for charset detection before decoding starts.
PeekedStream splices it back in front of the live stream so the decoder
sees the byte sequence from position 0, with nothing lost or repeated.
"""

from __future__ import annotations

import codecs
from typing import Iterable, Iterator

from .source_reader import RawChunk


class PeekedStream:
    """Concatenation of one already-consumed chunk and the rest of its stream."""

    def __init__(self, head: RawChunk, rest: Iterable[RawChunk]) -> None:
        self.head = head
        self.rest = rest

    def __iter__(self) -> Iterator[RawChunk]:
        yield self.head
        yield from self.rest


def prepend_chunk(head: RawChunk, rest: Iterable[RawChunk]) -> PeekedStream:
    """Put ``head`` back in front of ``rest``."""
    return PeekedStream(head, rest)


def decode_stream(chunks: Iterable[RawChunk], encoding: str) -> Iterator[str]:
    """
    Decode a chunk stream into text pieces.

    An incremental decoder carries multi-byte sequences that straddle chunk
    boundaries over to the next chunk. Malformed sequences are replaced with
    U+FFFD rather than aborting the stream.

    Args:
        chunks: RawChunks in stream order
        encoding: Codec name understood by ``codecs``

    Yields:
        Non-empty decoded text pieces
    """
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
    for chunk in chunks:
        text = decoder.decode(chunk.data)
        if text:
            yield text
    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail
