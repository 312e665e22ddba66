"""
Data Models for the Chunk Visualizer

Defines:
1. SplitterKind / ChunkParameters - What to split and how
2. ReconstructedChunk - A chunk mapped back onto absolute source offsets
3. HighlightResult - Markup plus the boundary-mismatch diagnostic
4. ChunkStatistics - Size statistics over the raw chunk list
5. PipelineResult - Everything one recompute produces
6. ChunkRequest / SampleResponse - HTTP payloads

Design Principles:
- Pydantic v2 for validation and serialization
- Outputs are rebuilt from scratch on every recompute and never mutated
- Offsets are character offsets into the (possibly truncated) input text

Usage:
    params = ChunkParameters(chunk_size=200, chunk_overlap=20)
    result = compute(text, params)
    result.to_json()
"""

import json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidParameterError
from .separators import ContentType


class SplitterKind(str, Enum):
    """Available splitting strategies."""
    FIXED_WIDTH = "fixed_width"
    RECURSIVE = "recursive"


class ChunkParameters(BaseModel):
    """
    Parameters for one chunking run.

    The overlap must stay below the chunk size; front ends are expected to
    clamp it (see pipeline.clamp_overlap) but the engine re-validates.
    """
    model_config = ConfigDict(frozen=True)

    chunk_size: int = Field(
        200,
        description="Maximum characters per chunk",
        gt=0,
    )
    chunk_overlap: int = Field(
        0,
        description="Characters shared by consecutive chunks",
        ge=0,
    )
    splitter: SplitterKind = Field(
        SplitterKind.RECURSIVE,
        description="Splitting strategy",
    )
    content_type: ContentType = Field(
        ContentType.TEXT,
        description="Separator profile used by the recursive splitter",
    )

    def model_post_init(self, __context: Any) -> None:
        if self.chunk_overlap >= self.chunk_size:
            raise InvalidParameterError(
                "chunk_overlap",
                self.chunk_overlap,
                f"chunk_overlap ({self.chunk_overlap}) must be less than "
                f"chunk_size ({self.chunk_size})",
            )


class ReconstructedChunk(BaseModel):
    """A chunk with its absolute offsets in the source text."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="1-based ordinal", ge=1)
    start_index: int = Field(..., ge=0)
    end_index: int = Field(..., ge=0)
    text: str
    overlap_with_next: int = Field(
        0,
        description="Trailing characters repeated at the start of the next chunk (0 for the last)",
        ge=0,
    )

    def model_post_init(self, __context: Any) -> None:
        if self.end_index - self.start_index != len(self.text):
            raise ValueError(
                f"chunk {self.id}: end_index - start_index "
                f"({self.end_index - self.start_index}) != len(text) ({len(self.text)})"
            )

    @property
    def length(self) -> int:
        return len(self.text)


class HighlightResult(BaseModel):
    """Rendered markup and the number of chunk cuts off a paragraph break."""
    markup: str = ""
    boundary_mismatch_count: int = 0


class ChunkStatistics(BaseModel):
    """Statistics over the raw chunk list."""
    count: int = 0
    total_chars: int = 0
    average: float = 0.0
    min: int = 0
    max: int = 0
    ratio_percent: int = 0
    total_tokens: Optional[int] = Field(
        None,
        description="Sum of tiktoken counts, only when token counting is enabled",
    )


class PipelineResult(BaseModel):
    """
    Complete output of one recompute.

    Produced by pipeline.compute and consumed by the rendering layer.
    """
    text: str = Field(
        ...,
        description="The text that was actually chunked (after truncation)",
    )
    parameters: ChunkParameters
    chunks: list[str] = Field(default_factory=list)
    reconstructed: list[ReconstructedChunk] = Field(default_factory=list)
    markup: str = ""
    boundary_mismatch_count: int = 0
    stats: ChunkStatistics = Field(default_factory=ChunkStatistics)
    warnings: list[str] = Field(default_factory=list)
    truncated: bool = False

    @property
    def total_chunks(self) -> int:
        return len(self.chunks)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)


# =============================================================================
# HTTP payloads
# =============================================================================


class ChunkRequest(BaseModel):
    text: str = Field("", description="Text to chunk")
    chunk_size: int = Field(200, gt=0)
    chunk_overlap: int = Field(0, ge=0)
    splitter: SplitterKind = SplitterKind.RECURSIVE
    content_type: ContentType = ContentType.TEXT
    clamp_overlap: bool = Field(
        False,
        description="Clamp chunk_overlap to chunk_size // 2 instead of rejecting it",
    )


class SampleResponse(BaseModel):
    content_type: ContentType
    text: str
