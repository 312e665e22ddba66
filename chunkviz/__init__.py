"""
chunkviz - Visualize how text splitters partition a document

Splits text with a fixed-width or a recursive delimiter splitter, maps the
chunks back onto the source offsets and renders unique and overlapping
spans as highlighted markup, so chunking settings can be explored before
feeding text to a language-model pipeline.

Quick Start:
    from chunkviz import ChunkParameters, SplitterKind, compute

    params = ChunkParameters(
        chunk_size=200,
        chunk_overlap=20,
        splitter=SplitterKind.RECURSIVE,
    )
    result = compute(text, params)
    result.markup                   # <span class="unique-span-0">...</span>...
    result.stats.count
"""

__version__ = "1.0.0"

from .exceptions import (
    ChunkVizError,
    InvalidParameterError,
    ReconstructionMismatchError,
    UnknownContentTypeError,
)
from .highlight import build_stylesheet, render_highlights
from .models import (
    ChunkParameters,
    ChunkStatistics,
    HighlightResult,
    PipelineResult,
    ReconstructedChunk,
    SplitterKind,
)
from .pipeline import clamp_overlap, compute, compute_chunks
from .reconstruct import reconstruct, verify_reconstruction
from .separators import ContentType, get_separators
from .service import ChunkVizService
from .config import ChunkVizConfig
from .splitters import split_fixed_width, split_recursive
from .stats import compute_statistics

__all__ = [
    "__version__",
    "ChunkVizError",
    "InvalidParameterError",
    "ReconstructionMismatchError",
    "UnknownContentTypeError",
    "build_stylesheet",
    "render_highlights",
    "ChunkParameters",
    "ChunkStatistics",
    "HighlightResult",
    "PipelineResult",
    "ReconstructedChunk",
    "SplitterKind",
    "clamp_overlap",
    "compute",
    "compute_chunks",
    "reconstruct",
    "verify_reconstruction",
    "ContentType",
    "get_separators",
    "ChunkVizService",
    "ChunkVizConfig",
    "split_fixed_width",
    "split_recursive",
    "compute_statistics",
]
