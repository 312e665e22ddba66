"""
Chunk Reconstructor - maps raw chunk strings back onto source offsets

Chunks carry no position of their own. Because the splitters never drop
characters and every consecutive pair shares exactly `overlap` characters,
offsets follow from the lengths alone:

    start[0]   = 0
    end[i]     = start[i] + len(chunk[i])
    start[i+1] = end[i] - overlap
"""

from typing import Sequence

from .exceptions import InvalidParameterError, ReconstructionMismatchError
from .models import ReconstructedChunk


def reconstruct(chunks: Sequence[str], overlap: int) -> list[ReconstructedChunk]:
    """
    Compute absolute offsets for an ordered chunk list.

    Args:
        chunks: Chunk strings in document order.
        overlap: Declared overlap between consecutive chunks.

    Returns:
        One ReconstructedChunk per input chunk. overlap_with_next is the
        declared overlap clamped to the chunk's length, and 0 for the last.
    """
    if overlap < 0:
        raise InvalidParameterError("overlap", overlap, f"overlap must be >= 0, got {overlap}")

    reconstructed: list[ReconstructedChunk] = []
    current_start = 0
    last = len(chunks) - 1

    for index, text in enumerate(chunks):
        start = current_start
        end = start + len(text)
        overlap_with_next = min(overlap, len(text)) if index < last else 0

        reconstructed.append(ReconstructedChunk(
            id=index + 1,
            start_index=start,
            end_index=end,
            text=text,
            overlap_with_next=overlap_with_next,
        ))
        current_start = end - overlap_with_next

    return reconstructed


def verify_reconstruction(reconstructed: Sequence[ReconstructedChunk], text: str) -> None:
    """
    Check reconstructed offsets against the source text.

    Raises:
        ReconstructionMismatchError: If a chunk's text differs from the source
            at its offsets, or the last chunk does not end at len(text).
    """
    expected = len(text)
    actual_end = reconstructed[-1].end_index if reconstructed else 0

    for index, chunk in enumerate(reconstructed):
        if text[chunk.start_index:chunk.end_index] != chunk.text:
            raise ReconstructionMismatchError(
                expected_length=expected,
                actual_end=actual_end,
                chunk_index=index,
                details=f"chunk text differs from source at [{chunk.start_index}:{chunk.end_index}]",
            )

    if actual_end != expected:
        raise ReconstructionMismatchError(expected_length=expected, actual_end=actual_end)
