"""
Custom Exceptions for the Chunking Engine.

Exception Hierarchy:
    ChunkVizError (base)
    ├── InvalidParameterError
    │   └── UnknownContentTypeError
    └── ReconstructionMismatchError

Oversized input and empty input are deliberately NOT exceptions: the
pipeline truncates oversized input and reports a warning, and empty
input simply produces no chunks.

Usage:
    from chunkviz.exceptions import (
        ChunkVizError,
        InvalidParameterError,
        ReconstructionMismatchError,
    )

    try:
        result = compute(text, params)
    except InvalidParameterError as e:
        print(f"Bad parameter {e.parameter}={e.value}: {e}")
    except ReconstructionMismatchError as e:
        print(f"Splitter produced inconsistent offsets: {e}")
"""

from __future__ import annotations

from typing import Any, Optional


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class ChunkVizError(Exception):
    """
    Base exception for all chunking-engine errors.

    Attributes:
        message: Human-readable error description
        details: Additional technical details (optional)
    """

    def __init__(
        self,
        message: str = "A chunking error occurred",
        details: Optional[str] = None,
    ):
        self.message = message
        self.details = details

        full_message = message
        if details:
            full_message = f"{message} | Details: {details}"

        super().__init__(full_message)


# =============================================================================
# PARAMETER ERRORS
# =============================================================================


class InvalidParameterError(ChunkVizError, ValueError):
    """
    Raised when chunk parameters are rejected before splitting.

    Attributes:
        parameter: Name of the offending parameter
        value: The rejected value
    """

    def __init__(
        self,
        parameter: str,
        value: Any,
        message: Optional[str] = None,
    ):
        self.parameter = parameter
        self.value = value
        msg = message or f"Invalid value for {parameter}: {value!r}"
        super().__init__(msg)


class UnknownContentTypeError(InvalidParameterError):
    """Raised when no separator profile exists for a content type tag."""

    def __init__(self, content_type: Any):
        super().__init__(
            parameter="content_type",
            value=content_type,
            message=f"No separator profile for content type: {content_type!r}",
        )


# =============================================================================
# CONSISTENCY ERRORS
# =============================================================================


class ReconstructionMismatchError(ChunkVizError):
    """
    Raised when reconstructed offsets do not line up with the source text.

    This always indicates a splitter bug, never bad user input, so it is
    not recovered from.

    Attributes:
        expected_length: Length of the text that was chunked
        actual_end: End offset the reconstruction arrived at
        chunk_index: 0-based index of the first offending chunk, if known
    """

    def __init__(
        self,
        expected_length: int,
        actual_end: int,
        chunk_index: Optional[int] = None,
        details: Optional[str] = None,
    ):
        self.expected_length = expected_length
        self.actual_end = actual_end
        self.chunk_index = chunk_index

        message = (
            f"Reconstructed chunks end at {actual_end}, "
            f"expected text length {expected_length}"
        )
        if chunk_index is not None:
            message = f"{message} (first mismatch at chunk {chunk_index})"
        super().__init__(message, details)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def format_error_chain(error: Exception) -> str:
    """
    Format an exception and its chain for logging.

    Returns a multi-line string showing the error hierarchy.
    """
    lines = []
    current: Optional[BaseException] = error
    depth = 0

    while current is not None:
        prefix = "  " * depth + ("└─ " if depth > 0 else "")
        lines.append(f"{prefix}{type(current).__name__}: {current}")
        current = current.__cause__
        depth += 1

    return "\n".join(lines)
