"""
Text Splitters - fixed-width windowing and recursive delimiter splitting

Both splitters return plain strings and never drop a character, so the
chunk list can be mapped back onto the source text by accumulating
lengths minus the overlap (see reconstruct.py).

Fixed-width:
    Windows of chunk_size characters, advancing by chunk_size - overlap.
    Windowing stops once a window reaches the end of the text.

Recursive:
1. Pick the first separator that occurs in the text ("" = characters).
2. Split on it, keeping the separator at the start of the following fragment.
3. Fragments longer than chunk_size are split again with the finer separators.
4. All leaf fragments are merged greedily, in document order, into chunks of
   at most chunk_size characters. Each new chunk is seeded with the last
   chunk_overlap characters of the previous one.

Usage:
    from chunkviz.splitters import split_fixed_width, split_recursive

    split_fixed_width("aaaaabbbbbccccc", 5)
    # ["aaaaa", "bbbbb", "ccccc"]
    split_recursive(text, chunk_size=200, chunk_overlap=20)
"""

from typing import Optional, Sequence

from .exceptions import InvalidParameterError
from .separators import ContentType, get_separators


def validate_parameters(chunk_size: int, chunk_overlap: int) -> None:
    """
    Reject chunk parameters that would produce corrupt offsets.

    Raises:
        InvalidParameterError: If chunk_size <= 0, chunk_overlap < 0 or
            chunk_overlap >= chunk_size.
    """
    if chunk_size <= 0:
        raise InvalidParameterError(
            "chunk_size", chunk_size, f"chunk_size must be > 0, got {chunk_size}"
        )
    if chunk_overlap < 0:
        raise InvalidParameterError(
            "chunk_overlap", chunk_overlap, f"chunk_overlap must be >= 0, got {chunk_overlap}"
        )
    if chunk_overlap >= chunk_size:
        raise InvalidParameterError(
            "chunk_overlap",
            chunk_overlap,
            f"chunk_overlap ({chunk_overlap}) must be less than chunk_size ({chunk_size})",
        )


# -----------------------------------------------------------------------------
# Fixed-width
# -----------------------------------------------------------------------------

def split_fixed_width(text: str, chunk_size: int, chunk_overlap: int = 0) -> list[str]:
    """
    Split text into consecutive fixed-size windows.

    Args:
        text: Input text.
        chunk_size: Window size in characters.
        chunk_overlap: Characters shared by consecutive windows.

    Returns:
        List of windows. Only the last one can be shorter than chunk_size.
    """
    validate_parameters(chunk_size, chunk_overlap)
    if not text:
        return []

    step = chunk_size - chunk_overlap
    chunks: list[str] = []
    offset = 0

    while offset < len(text):
        end = min(offset + chunk_size, len(text))
        chunks.append(text[offset:end])
        if end >= len(text):
            break
        offset += step

    return chunks


# -----------------------------------------------------------------------------
# Recursive
# -----------------------------------------------------------------------------

def split_recursive(
    text: str,
    chunk_size: int,
    chunk_overlap: int = 0,
    separators: Optional[Sequence[str]] = None,
    keep_whitespace: bool = True,
) -> list[str]:
    """
    Split text hierarchically on separators and merge up to chunk_size.

    Args:
        text: Input text.
        chunk_size: Maximum chunk length in characters.
        chunk_overlap: Characters repeated at the start of each following chunk.
        separators: Delimiters from coarsest to finest. Defaults to the
            plain-text profile.
        keep_whitespace: When False, chunks are stripped and empty ones
            dropped. Stripped chunks no longer map back onto the source
            offsets, so the visualization pipeline always keeps whitespace.

    Returns:
        List of chunks, none longer than chunk_size.
    """
    validate_parameters(chunk_size, chunk_overlap)
    if not text:
        return []

    if separators is None:
        separators = get_separators(ContentType.TEXT)

    if len(text) <= chunk_size:
        chunks = [text]
    else:
        leaves = _leaf_fragments(text, tuple(separators), chunk_size)
        chunks = _merge_fragments(leaves, chunk_size, chunk_overlap)

    if not keep_whitespace:
        chunks = [c.strip() for c in chunks if c.strip()]
    return chunks


def _split_keep_separator(text: str, separator: str) -> list[str]:
    """Split on separator, re-attaching it to the start of the next fragment."""
    if not separator:
        return list(text)
    parts = text.split(separator)
    fragments = [parts[0]] + [separator + part for part in parts[1:]]
    return [f for f in fragments if f]


def _leaf_fragments(text: str, separators: tuple[str, ...], chunk_size: int) -> list[str]:
    """Break text into fragments no longer than chunk_size, in document order."""
    separator = ""
    finer: tuple[str, ...] = ()
    for i, candidate in enumerate(separators):
        if candidate == "" or candidate in text:
            separator = candidate
            finer = separators[i + 1:]
            break

    leaves: list[str] = []
    for fragment in _split_keep_separator(text, separator):
        if len(fragment) <= chunk_size:
            leaves.append(fragment)
        else:
            leaves.extend(_leaf_fragments(fragment, finer, chunk_size))
    return leaves


def _merge_fragments(leaves: list[str], chunk_size: int, chunk_overlap: int) -> list[str]:
    """
    Greedily merge leaf fragments into overlapping chunks.

    A chunk is closed only once it holds more than chunk_overlap characters,
    so the next chunk's seed always comes from the chunk it follows. When the
    seed plus the next fragment cannot fit, the fragment is cut at character
    level to fill the chunk.
    """
    chunks: list[str] = []
    current = ""
    seeded = 0

    for fragment in leaves:
        while fragment:
            if len(current) + len(fragment) <= chunk_size:
                current += fragment
                break

            if len(current) > chunk_overlap:
                chunks.append(current)
                current = current[len(current) - chunk_overlap:] if chunk_overlap else ""
                seeded = len(current)
                continue

            room = chunk_size - len(current)
            current += fragment[:room]
            fragment = fragment[room:]

    if len(current) > seeded:
        chunks.append(current)

    return chunks
