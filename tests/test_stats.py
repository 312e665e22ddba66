"""Tests for chunkviz.stats."""

import pytest

from chunkviz.stats import compute_statistics
from chunkviz.token_counter import is_encoder_available


class TestComputeStatistics:
    def test_equal_chunks(self):
        stats = compute_statistics(["aaaaa", "bbbbb", "ccccc"])
        assert stats.count == 3
        assert stats.total_chars == 15
        assert stats.average == 5
        assert stats.min == 5
        assert stats.max == 5
        assert stats.ratio_percent == 100

    def test_empty(self):
        stats = compute_statistics([])
        assert stats.count == 0
        assert stats.total_chars == 0
        assert stats.average == 0
        assert stats.min == 0
        assert stats.max == 0
        assert stats.ratio_percent == 0

    def test_ratio_rounded(self):
        assert compute_statistics(["ab", "abc"]).ratio_percent == 67
        assert compute_statistics(["a", "bbbb"]).ratio_percent == 25

    def test_average_not_rounded(self):
        assert compute_statistics(["a", "bb"]).average == 1.5

    def test_empty_string_chunk(self):
        stats = compute_statistics([""])
        assert stats.count == 1
        assert stats.max == 0
        assert stats.ratio_percent == 0

    def test_tokens_off_by_default(self):
        assert compute_statistics(["hello world"]).total_tokens is None


@pytest.mark.skipif(not is_encoder_available(), reason="tiktoken encoding not available")
class TestTokenStatistics:
    def test_total_tokens(self):
        stats = compute_statistics(["Hello world", "Second chunk here."], include_tokens=True)
        assert stats.total_tokens >= 4

    def test_empty_list(self):
        assert compute_statistics([], include_tokens=True).total_tokens == 0
