#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Test suite for the book-ingest command line.
"""

import pytest

from book_ingest.cli_parser import create_parser, default_file_name, validate_args
from book_ingest.ingest_cli import main
from book_ingest.models import Book, close_database, init_database, load_chapters

URL = "https://files.example.com/uploads/novel.txt?sig=1"


class TestCliParser:
    """Test argument parsing."""

    def test_defaults(self):
        """Test parsing with only the URL."""
        args = create_parser().parse_args([URL])
        assert args.url == URL
        assert args.name is None
        assert args.batch_size is None
        assert args.verbose is False

    def test_rejects_non_http_url(self):
        """Test that a non-http URL is refused."""
        parser = create_parser()
        args = parser.parse_args(["ftp://example.com/book.txt"])
        with pytest.raises(SystemExit):
            validate_args(args, parser)

    def test_rejects_zero_batch_size(self):
        """Test that a zero batch size is refused."""
        parser = create_parser()
        args = parser.parse_args([URL, "--batch-size", "0"])
        with pytest.raises(SystemExit):
            validate_args(args, parser)

    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://x.com/a/b/漂流记.txt?token=1", "漂流记.txt"),
            ("https://x.com/a/book.txt#frag", "book.txt"),
            ("https://x.com/", "x.com"),
        ],
    )
    def test_default_file_name(self, url, expected):
        """Test filename derivation from the URL."""
        assert default_file_name(url) == expected


@pytest.mark.integration
class TestMain:
    """Test the CLI entry point end to end."""

    def test_ingest_to_database(self, tmp_path, mock_requests_get, make_response):
        """Test a successful run writing to a database file."""
        mock_requests_get.return_value = make_response(["第一章 开端\nhello\n第二章 发展\nworld\n".encode("utf-8")])
        db_path = tmp_path / "books.db"
        main([URL, "--config", str(tmp_path / "config.yml"), "--database", str(db_path), "--owner", "u1"])

        init_database(str(db_path))
        try:
            book = Book.get()
            assert book.title == "novel"
            assert book.owner == "u1"
            assert [c.content for c in load_chapters(book.id)] == ["hello", "world"]
        finally:
            close_database()

    def test_failure_exits_non_zero(self, tmp_path, mock_requests_get, make_response):
        """Test that an ingestion error ends with exit code 1."""
        mock_requests_get.return_value = make_response([], status_code=404)
        with pytest.raises(SystemExit) as exc_info:
            main([URL, "--config", str(tmp_path / "config.yml"), "--database", str(tmp_path / "books.db")])
        assert exc_info.value.code == 1
