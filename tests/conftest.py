#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest configuration and shared fixtures for all tests
"""

import os
import sys
from unittest.mock import Mock, patch

import pytest

# Add src directory to path so we can import our modules
src_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
sys.path.insert(0, src_dir)

from book_ingest.models import close_database, init_database


@pytest.fixture
def db():
    """Fresh in-memory database bound to the models"""
    database = init_database(":memory:")
    yield database
    close_database()


@pytest.fixture
def make_response():
    """Factory for fake streaming responses"""

    def _make(chunks, status_code=200, reason=None, raw=True):
        response = Mock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 400
        response.reason = reason or ("OK" if response.ok else "Not Found")
        response.raw = Mock() if raw else None
        if callable(chunks):
            response.iter_content.side_effect = lambda chunk_size=1: chunks()
        else:
            response.iter_content.return_value = iter(chunks)
        return response

    return _make


@pytest.fixture
def mock_requests_get():
    """Mock requests.get for download tests"""
    with patch("book_ingest.source_reader.requests.get") as mock_get:
        yield mock_get


@pytest.fixture
def sample_chinese_text():
    """Sample Chinese text for testing"""
    return (
        "书名：漂流记\n"
        "作者：佚名\n"
        "第一章 开端\n"
        "这是一段中文文本。包含各种标点符号！\n"
        "“对话内容，”他说道。\n"
        "第二章 继续\n"
        "更多内容。\n"
    )


# Configure pytest options
def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
