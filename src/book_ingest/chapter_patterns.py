#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Replaced the heading tables with the narrow chapter-marker vocabulary
# - Added CHINESE_NUMERALS and CHAPTER_BOUNDARY_RE
#

"""
chapter_patterns.py - Regex patterns for chapter boundary detection
===================================================================

The vocabulary is deliberately narrow: a line is a boundary only when it
starts (after whitespace) with an explicit chapter marker. Everything else
is content.
"""

import re

# ────────────────────────── regexes & tables ────────────────────────── #

# Digits and numerals accepted between 第 and 章/回/节
CHINESE_NUMERALS = "零〇一二两三四五六七八九十百千万"
FULLWIDTH_DIGITS = "０-９"

CHAPTER_BOUNDARY_RE = re.compile(
    rf"^\s*"  # \s also covers the full-width space U+3000
    rf"(?:"
    rf"第[0-9{FULLWIDTH_DIGITS}{CHINESE_NUMERALS}]+[章回节]"  # 第一章, 第12回, 第三节
    rf"|"  # OR
    rf"chapter\s+\d+"  # Chapter 12
    rf")",
    re.IGNORECASE,
)


def is_chapter_boundary(line: str) -> bool:
    """Return True if ``line`` opens a new chapter."""
    return CHAPTER_BOUNDARY_RE.match(line) is not None
