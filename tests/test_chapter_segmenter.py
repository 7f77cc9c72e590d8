#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for chapter_segmenter module.
"""

from book_ingest.chapter_patterns import is_chapter_boundary
from book_ingest.chapter_segmenter import ChapterDraft, ChapterSegmenter, ParsedChapter, segment_lines
from book_ingest.common_constants import FRONT_MATTER_TITLE


def _segment(text):
    return list(segment_lines(text.splitlines()))


class TestChapterSegmenter:
    """Test the segmentation state machine."""

    def test_initial_state(self):
        """Test that segmentation starts in the front matter draft."""
        segmenter = ChapterSegmenter()
        assert segmenter.draft == ChapterDraft(title=FRONT_MATTER_TITLE, lines=[])
        assert segmenter.emitted == 0

    def test_feed_returns_closed_chapter(self):
        """Test that a boundary line returns the chapter it closes."""
        segmenter = ChapterSegmenter()
        assert segmenter.feed("前言内容") is None
        closed = segmenter.feed("第一章 开端")
        assert closed == ParsedChapter(title=FRONT_MATTER_TITLE, content="前言内容", order_index=1, word_count=4)
        assert segmenter.draft.title == "第一章 开端"
        assert segmenter.draft.lines == []

    def test_finish_without_content(self):
        """Test that finishing on an empty draft emits nothing."""
        segmenter = ChapterSegmenter()
        segmenter.feed("第一章")
        assert segmenter.finish() is None

    def test_custom_front_matter_title(self):
        """Test the configurable front matter title."""
        chapters = list(segment_lines(["hello"], front_matter_title="Preface"))
        assert chapters[0].title == "Preface"


class TestSegmentationScenarios:
    """Test whole-text segmentation scenarios."""

    def test_no_markers_single_chapter(self):
        """Test text without markers becomes one front matter chapter."""
        lines = ["first line", "second line", "", "third line"]
        chapters = list(segment_lines(lines))
        assert len(chapters) == 1
        assert chapters[0].title == "序章/前言"
        assert chapters[0].content == "first line\nsecond line\n\nthird line"
        assert chapters[0].order_index == 1

    def test_two_chapters(self):
        """Test the basic two chapter split."""
        chapters = _segment("第一章 开端\nhello\n第二章 发展\nworld\n")
        assert [(c.title, c.content, c.order_index) for c in chapters] == [
            ("第一章 开端", "hello", 1),
            ("第二章 发展", "world", 2),
        ]

    def test_only_boundaries_yield_nothing(self):
        """Test two consecutive boundary lines and nothing else."""
        assert list(segment_lines(["第一章", "第二章"])) == []

    def test_back_to_back_markers_drop_empty_chapter(self):
        """Test that an empty chapter between two markers is dropped."""
        chapters = list(segment_lines(["intro", "第一章 空", "第二章 实", "content"]))
        assert [c.title for c in chapters] == ["序章/前言", "第二章 实"]
        assert [c.order_index for c in chapters] == [1, 2]

    def test_front_matter_then_chapters(self, sample_chinese_text):
        """Test text with a preamble before the first chapter."""
        chapters = list(segment_lines(sample_chinese_text.splitlines()))
        assert [c.title for c in chapters] == ["序章/前言", "第一章 开端", "第二章 继续"]
        assert chapters[0].content == "书名：漂流记\n作者：佚名"

    def test_title_is_trimmed(self):
        """Test that titles lose surrounding whitespace, full-width included."""
        chapters = list(segment_lines(["　第3章　漂流　", "text"]))
        assert chapters[0].title == "第3章　漂流"

    def test_word_count_is_character_length(self):
        """Test word_count counts characters of the joined content."""
        chapters = list(segment_lines(["第一章", "你好", "world"]))
        assert chapters[0].content == "你好\nworld"
        assert chapters[0].word_count == len("你好\nworld") == 8

    def test_blank_line_chapter_is_kept(self):
        """Test a chapter whose only line is blank still has content."""
        chapters = list(segment_lines(["第一章", ""]))
        assert len(chapters) == 1
        assert chapters[0].content == ""


class TestSegmentationProperties:
    """Test invariants over a mixed input."""

    LINES = [
        "前言",
        "",
        "第一章 A",
        "a1",
        "a2",
        "第二章 B",
        "第三章 C",
        "c1",
        "Chapter 4 D",
        "",
        "d1",
        "我觉得第3章很精彩",
    ]

    def test_order_index_is_dense(self):
        """Test order_index runs 1..N without gaps."""
        chapters = list(segment_lines(self.LINES))
        assert [c.order_index for c in chapters] == list(range(1, len(chapters) + 1))

    def test_chapter_count_matches_non_empty_drafts(self):
        """Test one chapter per boundary crossing, minus the empty drafts."""
        boundaries = sum(1 for line in self.LINES if is_chapter_boundary(line))
        chapters = list(segment_lines(self.LINES))
        # front matter + 4 boundaries - 1 empty chapter (第二章 B)
        assert boundaries == 4
        assert len(chapters) == 1 + boundaries - 1

    def test_content_round_trip(self):
        """Test joining chapter contents restores every non-title line."""
        chapters = list(segment_lines(self.LINES))
        restored = [line for c in chapters for line in c.content.split("\n")]
        assert restored == [line for line in self.LINES if not is_chapter_boundary(line)]
