"""Tests for chunkviz.reconstruct."""

import pytest

from chunkviz.exceptions import InvalidParameterError, ReconstructionMismatchError
from chunkviz.reconstruct import reconstruct, verify_reconstruction
from chunkviz.splitters import split_fixed_width, split_recursive


class TestReconstruct:
    def test_empty(self):
        assert reconstruct([], 3) == []

    def test_no_overlap(self):
        chunks = reconstruct(["aaaaa", "bbbbb", "ccccc"], 0)
        assert [(c.start_index, c.end_index) for c in chunks] == [(0, 5), (5, 10), (10, 15)]
        assert [c.id for c in chunks] == [1, 2, 3]

    def test_with_overlap(self):
        first, second = reconstruct(["aaaaab", "abbbbb"], 2)
        assert (first.start_index, first.end_index) == (0, 6)
        assert first.overlap_with_next == 2
        assert second.start_index == 4
        assert second.end_index == 10
        assert second.overlap_with_next == 0

    def test_last_chunk_has_no_forward_overlap(self):
        chunks = reconstruct(["abc", "cde", "efg"], 1)
        assert [c.overlap_with_next for c in chunks] == [1, 1, 0]

    def test_overlap_clamped_to_chunk_length(self):
        chunks = reconstruct(["ab", "bcdef"], 4)
        assert chunks[0].overlap_with_next == 2
        assert chunks[1].start_index == 0

    def test_length_invariant(self, prose):
        for chunk in reconstruct(split_recursive(prose, 37, 5), 5):
            assert chunk.end_index - chunk.start_index == len(chunk.text)
            assert chunk.length == len(chunk.text)

    def test_next_start_follows_overlap(self, prose):
        chunks = reconstruct(split_recursive(prose, 37, 5), 5)
        for current, following in zip(chunks, chunks[1:]):
            assert following.start_index == current.end_index - current.overlap_with_next

    @pytest.mark.parametrize("size,overlap", [(5, 0), (12, 4), (50, 25)])
    def test_monotonic_and_ends_at_text_length(self, prose, size, overlap):
        for chunks in (
            split_fixed_width(prose, size, overlap),
            split_recursive(prose, size, overlap),
        ):
            reconstructed = reconstruct(chunks, overlap)
            starts = [c.start_index for c in reconstructed]
            ends = [c.end_index for c in reconstructed]
            assert starts == sorted(starts)
            assert ends == sorted(ends)
            assert reconstructed[-1].end_index == len(prose)

    def test_negative_overlap(self):
        with pytest.raises(InvalidParameterError):
            reconstruct(["abc"], -1)

    def test_result_is_immutable(self):
        chunk = reconstruct(["abc"], 0)[0]
        with pytest.raises(Exception):
            chunk.start_index = 5


class TestVerifyReconstruction:
    def test_consistent(self):
        text = "aaaaabbbbb"
        verify_reconstruction(reconstruct(split_fixed_width(text, 6, 2), 2), text)

    def test_empty(self):
        verify_reconstruction([], "")

    def test_short_coverage(self):
        with pytest.raises(ReconstructionMismatchError) as exc_info:
            verify_reconstruction(reconstruct(["abc"], 0), "abcdef")
        assert exc_info.value.expected_length == 6
        assert exc_info.value.actual_end == 3

    def test_wrong_content(self):
        with pytest.raises(ReconstructionMismatchError) as exc_info:
            verify_reconstruction(reconstruct(["abc", "xyz"], 0), "abcdef")
        assert exc_info.value.chunk_index == 1

    def test_undeclared_overlap(self):
        """Chunks that overlap by more than declared do not line up."""
        with pytest.raises(ReconstructionMismatchError):
            verify_reconstruction(reconstruct(["abcd", "cdef"], 0), "abcdef")

    def test_text_without_chunks(self):
        with pytest.raises(ReconstructionMismatchError):
            verify_reconstruction([], "abc")
