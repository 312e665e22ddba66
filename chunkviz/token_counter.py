"""
Token Counter for chunk statistics

Uses tiktoken with the cl100k_base encoding by default, the same encoding
most chat models' context budgets are quoted in. Counting is optional in
the pipeline because the first get_encoding() call may need to download
the encoding file.

Usage:
    from chunkviz.token_counter import count_tokens, count_tokens_batch

    n = count_tokens("The quick brown fox.")
    counts = count_tokens_batch(["First chunk.", "Second chunk."])
"""

import tiktoken

DEFAULT_ENCODING = "cl100k_base"

# Encoders are expensive to build; keep one per encoding name.
_encoders: dict[str, tiktoken.Encoding] = {}


def _get_encoder(encoding_name: str = DEFAULT_ENCODING) -> tiktoken.Encoding:
    """Get or initialize the tiktoken encoder for encoding_name."""
    encoder = _encoders.get(encoding_name)
    if encoder is None:
        encoder = tiktoken.get_encoding(encoding_name)
        _encoders[encoding_name] = encoder
    return encoder


def is_encoder_available(encoding_name: str = DEFAULT_ENCODING) -> bool:
    """Return True if the encoding can be loaded (cached or downloadable)."""
    try:
        _get_encoder(encoding_name)
    except Exception:
        return False
    return True


def count_tokens(text: str, encoding_name: str = DEFAULT_ENCODING) -> int:
    """
    Count the number of tokens in a text string.

    Args:
        text: The text to tokenize.
        encoding_name: tiktoken encoding to use.

    Returns:
        Number of tokens.
    """
    if not text:
        return 0
    return len(_get_encoder(encoding_name).encode(text))


def count_tokens_batch(texts: list[str], encoding_name: str = DEFAULT_ENCODING) -> list[int]:
    """
    Count tokens for a list of texts.

    Returns:
        List of token counts, one per input text.
    """
    if not texts:
        return []
    encoder = _get_encoder(encoding_name)
    return [len(encoder.encode(t)) if t else 0 for t in texts]
