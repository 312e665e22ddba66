"""
Chunking Pipeline - the engine interface consumed by front ends

One pure function per step, plus compute() running them end to end:

    text + ChunkParameters
      -> compute_chunks()        fixed-width or recursive split
      -> reconstruct()           absolute offsets + overlaps
      -> verify_reconstruction() abort on inconsistent offsets
      -> render_highlights()     markup + boundary mismatch count
      -> compute_statistics()    from the raw chunk list

Every call works on its own inputs and returns a new PipelineResult, so a
front end can simply call compute() again on each input change and keep
whichever result arrived last.

Usage:
    from chunkviz import ChunkParameters, compute

    result = compute(text, ChunkParameters(chunk_size=200, chunk_overlap=20))
    print(result.stats.count, result.boundary_mismatch_count)
"""

from typing import Optional, Union

from .exceptions import InvalidParameterError, ReconstructionMismatchError, format_error_chain
from .highlight import render_highlights
from .logging_config import get_logger
from .models import ChunkParameters, PipelineResult, SplitterKind
from .reconstruct import reconstruct, verify_reconstruction
from .separators import ContentType, get_separators
from .splitters import split_fixed_width, split_recursive, validate_parameters
from .stats import compute_statistics

logger = get_logger(__name__)


def clamp_overlap(chunk_size: int, chunk_overlap: int) -> int:
    """Clamp an overlap into [0, chunk_size // 2], as front-end sliders do."""
    return max(0, min(chunk_overlap, chunk_size // 2))


def compute_chunks(
    text: str,
    chunk_size: int,
    chunk_overlap: int,
    splitter: Union[SplitterKind, str] = SplitterKind.RECURSIVE,
    content_type: Union[ContentType, str] = ContentType.TEXT,
) -> list[str]:
    """
    Split text with the selected strategy.

    Raises:
        InvalidParameterError: On invalid sizes, an unknown splitter kind or
            an unknown content type.
    """
    validate_parameters(chunk_size, chunk_overlap)
    try:
        kind = SplitterKind(splitter)
    except ValueError as exc:
        raise InvalidParameterError("splitter", splitter) from exc

    if kind is SplitterKind.FIXED_WIDTH:
        return split_fixed_width(text, chunk_size, chunk_overlap)

    return split_recursive(
        text,
        chunk_size,
        chunk_overlap,
        separators=get_separators(content_type),
        keep_whitespace=True,
    )


def truncate_input(text: str, max_input_chars: Optional[int]) -> tuple[str, Optional[str]]:
    """
    Cut text down to max_input_chars.

    Returns:
        (text, warning) where warning is None when nothing was cut.
    """
    if max_input_chars is None or len(text) <= max_input_chars:
        return text, None
    if max_input_chars <= 0:
        raise InvalidParameterError(
            "max_input_chars", max_input_chars, f"max_input_chars must be > 0, got {max_input_chars}"
        )
    warning = f"Input truncated from {len(text)} to {max_input_chars} characters"
    return text[:max_input_chars], warning


def compute(
    text: str,
    params: ChunkParameters,
    max_input_chars: Optional[int] = None,
    include_tokens: bool = False,
) -> PipelineResult:
    """
    Run the full pipeline for one (text, parameters) snapshot.

    Args:
        text: Input text. Empty text yields an empty result.
        params: Chunking parameters.
        max_input_chars: Optional input cap; longer input is truncated and a
            warning is attached to the result.
        include_tokens: Also count tokens for the statistics.

    Returns:
        PipelineResult with chunks, offsets, markup and statistics.

    Raises:
        InvalidParameterError: If the parameters are invalid.
        ReconstructionMismatchError: If the splitter output does not map back
            onto the text.
    """
    warnings: list[str] = []
    text, warning = truncate_input(text or "", max_input_chars)
    if warning:
        logger.warning(warning)
        warnings.append(warning)

    chunks = compute_chunks(
        text,
        params.chunk_size,
        params.chunk_overlap,
        params.splitter,
        params.content_type,
    )

    reconstructed = reconstruct(chunks, params.chunk_overlap)
    try:
        verify_reconstruction(reconstructed, text)
    except ReconstructionMismatchError as exc:
        logger.error(
            f"Splitter {params.splitter.value} produced inconsistent offsets:\n"
            f"{format_error_chain(exc)}"
        )
        raise

    highlights = render_highlights(reconstructed, text)
    stats = compute_statistics(chunks, include_tokens=include_tokens)

    logger.debug(
        f"Computed {len(chunks)} chunks from {len(text)} chars "
        f"(splitter={params.splitter.value}, size={params.chunk_size}, "
        f"overlap={params.chunk_overlap}, content_type={params.content_type.value})"
    )

    return PipelineResult(
        text=text,
        parameters=params,
        chunks=chunks,
        reconstructed=reconstructed,
        markup=highlights.markup,
        boundary_mismatch_count=highlights.boundary_mismatch_count,
        stats=stats,
        warnings=warnings,
        truncated=warning is not None,
    )
