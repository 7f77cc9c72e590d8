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

"""Lazy line splitting over a stream of decoded text pieces."""

from __future__ import annotations

import re
from typing import Iterable, Iterator

# CRLF must come first so the pair is consumed as a single terminator
LINE_BREAK_RE = re.compile(r"\r\n|\n|\r")


def iter_lines(pieces: Iterable[str]) -> Iterator[str]:
    """
    Yield lines from decoded text pieces, terminators stripped.

    Only the current partial line is buffered. A CR at the very end of a
    piece is held back until the next piece shows whether it is half of a
    CRLF pair.

    Args:
        pieces: Decoded text in stream order

    Yields:
        One string per logical line
    """
    pending = ""
    for piece in pieces:
        if not piece:
            continue
        pending += piece
        start = 0
        for match in LINE_BREAK_RE.finditer(pending):
            if match.group() == "\r" and match.end() == len(pending):
                break
            yield pending[start : match.start()]
            start = match.end()
        pending = pending[start:]

    if pending:
        yield pending[:-1] if pending.endswith("\r") else pending
