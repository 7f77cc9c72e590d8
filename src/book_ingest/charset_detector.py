#!/usr/bin/env python3

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
charset_detector.py - Encoding detection on the first streamed chunk

Detection only ever looks at a bounded sample (the first RawChunk), so its
cost does not grow with the size of the book. It never fails: when chardet
has nothing useful to say, the default encoding is used.
"""

import codecs
import logging
from dataclasses import dataclass

import chardet

from .common_constants import (
    DEFAULT_ENCODING,
    GBK_FAMILY_ALIASES,
    MIN_ENCODING_CONFIDENCE,
    SUPERSET_ENCODING,
    UTF8_SUBSET_ALIASES,
)

# Default logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectedEncoding:
    """Encoding chosen for one ingestion run."""

    name: str
    confidence: float


def normalize_encoding_name(name: str, default: str = DEFAULT_ENCODING) -> str:
    """
    Map a detected encoding name to the codec used for decoding.

    GB2312 and GBK are replaced by GB18030, their strict superset, since a
    GBK decoder rejects valid GB18030 sequences. ASCII is replaced by the
    default encoding because an ASCII-only sample says nothing about the
    bytes that follow it. Any other name is returned unchanged.
    """
    upper = name.upper()
    if upper in GBK_FAMILY_ALIASES:
        return SUPERSET_ENCODING
    if upper in UTF8_SUBSET_ALIASES:
        return default
    return name


def detect(
    sample: bytes,
    min_confidence: float = MIN_ENCODING_CONFIDENCE,
    default: str = DEFAULT_ENCODING,
    logger: logging.Logger | None = None,
) -> DetectedEncoding:
    """
    Guess the text encoding of a byte sample.

    Parameters:
    - sample: The first chunk of the stream
    - min_confidence: Results below this confidence fall back to ``default``
    - default: Encoding returned when detection is inconclusive
    - logger: Logger instance (uses module logger if None)

    Returns: DetectedEncoding with the normalized codec name
    """
    if logger is None:
        logger = globals()["logger"]

    result = chardet.detect(sample) if sample else {}
    raw_name = result.get("encoding")
    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet.detect: {raw_name} (confidence: {confidence})")

    if not raw_name or confidence < min_confidence:
        logger.debug(f"No confident guess, using {default}")
        return DetectedEncoding(name=default, confidence=confidence)

    name = normalize_encoding_name(raw_name, default=default)
    try:
        codecs.lookup(name)
    except LookupError:
        logger.warning(f"Detected encoding {name!r} has no codec, using {default}")
        return DetectedEncoding(name=default, confidence=confidence)

    logger.info(f"Detected encoding: {raw_name}, using: {name}")
    return DetectedEncoding(name=name, confidence=confidence)
