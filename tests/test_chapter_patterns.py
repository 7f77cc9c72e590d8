#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for chapter_patterns module.
"""

import pytest

from book_ingest.chapter_patterns import CHAPTER_BOUNDARY_RE, is_chapter_boundary


class TestChapterBoundary:
    """Test the chapter boundary vocabulary."""

    @pytest.mark.parametrize(
        "line",
        [
            "第一章 开端",
            "第3章",
            "第十二回 风雪山神庙",
            "第一百零八节",
            "第两千章 终",
            "第１２章 全角数字",
            "　第3章　漂流",
            "   第五章",
            "\t第五章",
            "Chapter 1",
            "chapter 12: The Storm",
            "CHAPTER 7",
            "  Chapter 3 Leaving home",
        ],
    )
    def test_boundary_lines(self, line):
        """Test lines that open a new chapter."""
        assert is_chapter_boundary(line)

    @pytest.mark.parametrize(
        "line",
        [
            "我觉得第3章很精彩",
            "他读完了第一章。",
            "第章",
            "第X章",
            "Chapter",
            "Chapter one",
            "The Chapter 3 of my life",
            "",
            "　",
        ],
    )
    def test_content_lines(self, line):
        """Test lines that are plain content."""
        assert not is_chapter_boundary(line)

    def test_marker_must_start_the_line(self):
        """Test that the regex is anchored at the start of the line."""
        assert CHAPTER_BOUNDARY_RE.match("第一章") is not None
        assert CHAPTER_BOUNDARY_RE.match("序 第一章") is None
