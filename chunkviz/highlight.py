"""
Highlight Renderer - reconstructed chunks to HTML markup

Each chunk's unique span is wrapped in <span class="unique-span-N"> where N
cycles through PALETTE by chunk position; each overlap span is wrapped in
<span class="overlap-span">. The text content of the markup (tags removed,
entities unescaped) is exactly the source text.

The renderer also counts boundary mismatches: chunks whose unique content
does not end on a paragraph break.
"""

import html
from typing import Sequence

from .models import HighlightResult, ReconstructedChunk

PALETTE: tuple[str, ...] = (
    "#70d6ff",
    "#e9ff70",
    "#ff9770",
    "#ffd670",
    "#ff70a6",
)
OVERLAP_COLOR = "#a0e8af"

UNIQUE_CLASS_PREFIX = "unique-span-"
OVERLAP_CLASS = "overlap-span"


def render_highlights(
    chunks: Sequence[ReconstructedChunk],
    original_text: str,
) -> HighlightResult:
    """
    Render chunks as a single marked-up string.

    Args:
        chunks: Output of reconstruct(), in order.
        original_text: The text the chunks were cut from. Used for the
            boundary check, since chunks carry no surrounding context.

    Returns:
        HighlightResult with the markup and boundary_mismatch_count.
    """
    parts: list[str] = []
    # Absolute offset up to which source text has been emitted. Leading
    # overlaps were already emitted as the previous chunk's overlap span.
    cursor = 0
    mismatches = 0

    for index, chunk in enumerate(chunks):
        unique_end = chunk.end_index - chunk.overlap_with_next

        if unique_end > cursor:
            css_class = f"{UNIQUE_CLASS_PREFIX}{index % len(PALETTE)}"
            parts.append(_span(css_class, _slice(chunk, cursor, unique_end)))
            cursor = unique_end

        if chunk.end_index > cursor:
            parts.append(_span(OVERLAP_CLASS, _slice(chunk, cursor, chunk.end_index)))
            cursor = chunk.end_index

        if not is_paragraph_boundary(original_text, unique_end):
            mismatches += 1

    return HighlightResult(markup="".join(parts), boundary_mismatch_count=mismatches)


def is_paragraph_boundary(text: str, index: int) -> bool:
    """True if a cut before text[index] falls on a paragraph-ending signal."""
    if index >= len(text):
        return True
    if text[index] == "\n":
        return True
    return index >= 2 and text[index - 2:index] == ".\n"


def build_stylesheet(
    palette: Sequence[str] = PALETTE,
    overlap_color: str = OVERLAP_COLOR,
) -> str:
    """CSS rules for the classes emitted by render_highlights."""
    rules = [
        f".{UNIQUE_CLASS_PREFIX}{i} {{ background-color: {color}; }}"
        for i, color in enumerate(palette)
    ]
    rules.append(f".{OVERLAP_CLASS} {{ background-color: {overlap_color}; }}")
    return "\n".join(rules) + "\n"


def _slice(chunk: ReconstructedChunk, start: int, end: int) -> str:
    return chunk.text[start - chunk.start_index:end - chunk.start_index]


def _span(css_class: str, content: str) -> str:
    return f'<span class="{css_class}">{html.escape(content, quote=False)}</span>'
