"""Tests for the readable-run text heuristic."""

import pytest

from webdoc_chat.domain.services.text_extraction import extract_readable_text

pytestmark = pytest.mark.unit


class TestExtractReadableText:
    def test_runs_shorter_than_minimum_are_dropped(self):
        assert extract_readable_text(b"a" * 19) == ""
        assert extract_readable_text(b"a" * 20) == "a" * 20

    def test_non_readable_bytes_split_runs(self, sample_pdf_bytes):
        text = extract_readable_text(sample_pdf_bytes)

        assert "The quick brown fox jumps over the lazy dog near the river bank." in text
        assert "/Type" not in text

    def test_invalid_utf8_is_replaced_and_splits_runs(self):
        data = b"hello world this is text\xff\xfemore readable text here ok"

        assert extract_readable_text(data) == "hello world this is text more readable text here ok"

    def test_whitespace_is_collapsed(self):
        data = b"first   run of readable text\n\n\nsecond  "

        assert extract_readable_text(data) == "first run of readable text second"

    def test_only_first_runs_are_kept(self):
        data = b"|".join([b"x" * 20] * 150)

        text = extract_readable_text(data)

        assert text.count("x" * 20) == 100

    def test_only_prefix_is_inspected(self):
        data = b"a" * 30 + b"|" + b"b" * 30

        assert extract_readable_text(data, prefix_bytes=25) == "a" * 25

    def test_custom_limits(self):
        data = b"|".join([b"abcde"] * 5)

        assert extract_readable_text(data, min_run_chars=5, max_runs=2) == "abcde abcde"

    def test_empty_input(self):
        assert extract_readable_text(b"") == ""
