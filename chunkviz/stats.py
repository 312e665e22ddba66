"""Chunk statistics: count, sizes and min/max ratio over the raw chunk list."""

from typing import Sequence

from .models import ChunkStatistics
from .token_counter import count_tokens_batch


def compute_statistics(chunks: Sequence[str], include_tokens: bool = False) -> ChunkStatistics:
    """
    Reduce a chunk list to display statistics.

    Args:
        chunks: Raw chunk strings.
        include_tokens: Also sum tiktoken counts into total_tokens.

    Returns:
        ChunkStatistics. Empty input yields all zeros rather than NaN.
    """
    lengths = [len(c) for c in chunks]
    count = len(lengths)
    total = sum(lengths)
    smallest = min(lengths, default=0)
    largest = max(lengths, default=0)

    return ChunkStatistics(
        count=count,
        total_chars=total,
        average=total / count if count else 0.0,
        min=smallest,
        max=largest,
        ratio_percent=round(smallest / largest * 100) if largest else 0,
        total_tokens=sum(count_tokens_batch(list(chunks))) if include_tokens else None,
    )
