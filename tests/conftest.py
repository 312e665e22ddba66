"""
Pytest fixtures for chunkviz tests.
"""

import html
import re

import pytest

from chunkviz import ChunkParameters, ChunkVizConfig, ChunkVizService, SplitterKind


PARAGRAPHS = "Alpha one.\n\nBeta two.\n\nGamma three.\n\nDelta four."

PROSE = (
    "Chunking decides what a retrieval system can find. A sentence cut in half "
    "may never come back.\n\n"
    "The simplest splitter counts characters. It cuts wherever the window ends, "
    "in the middle of a word if need be.\n"
    "A recursive splitter prefers paragraph breaks, then line breaks, then "
    "sentence ends! Does it work? Only when nothing else matches does it cut "
    "between single characters.\n\n"
    "Overlap repeats the end of one chunk at the start of the next."
)


def strip_markup(markup: str) -> str:
    """Text content of rendered markup."""
    return html.unescape(re.sub(r"<[^>]+>", "", markup))


@pytest.fixture
def paragraphs():
    """Four short paragraphs separated by blank lines."""
    return PARAGRAPHS


@pytest.fixture
def prose():
    """Multi-paragraph prose with line breaks and mixed punctuation."""
    return PROSE


@pytest.fixture
def recursive_params():
    """Recursive splitter parameters with a small overlap."""
    return ChunkParameters(
        chunk_size=60,
        chunk_overlap=6,
        splitter=SplitterKind.RECURSIVE,
    )


@pytest.fixture
def service():
    """Service with a small input cap so truncation is easy to trigger."""
    return ChunkVizService(ChunkVizConfig(
        max_input_chars=1000,
        default_chunk_size=50,
        default_overlap=5,
    ))
