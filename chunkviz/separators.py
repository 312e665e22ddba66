"""
Separator Policy for the Recursive Splitter

Static lookup table from content type to an ordered tuple of delimiters,
coarsest first. The recursive splitter tries them in order and falls back
to character-level splitting ("") when nothing else matches.

Adding a content type means adding one enum member and one entry in
SEPARATORS; no other module changes.

Usage:
    from chunkviz.separators import ContentType, get_separators

    seps = get_separators(ContentType.PYTHON)
    # ("\\nclass ", "\\ndef ", "\\n\\tdef ", "\\n    def ", "\\n\\n", "\\n", " ", "")
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from .exceptions import UnknownContentTypeError


class ContentType(str, Enum):
    """Content type tags with a separator profile."""
    TEXT = "text"
    MARKDOWN = "markdown"
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    HTML = "html"


_PROSE: tuple[str, ...] = (
    "\n\n",  # Paragraph breaks
    "\n",    # Line breaks
    ". ",    # Sentences
    "! ",
    "? ",
    " ",     # Words
    "",      # Characters (last resort)
)

_MARKDOWN: tuple[str, ...] = (
    # Headings, deepest last so sections split before subsections
    "\n# ",
    "\n## ",
    "\n### ",
    "\n#### ",
    "\n##### ",
    "\n###### ",
    # Code fences
    "```\n",
    # Horizontal rules
    "\n***\n",
    "\n---\n",
    "\n___\n",
    "\n\n",
    "\n",
    " ",
    "",
)

_PYTHON: tuple[str, ...] = (
    "\nclass ",
    "\ndef ",
    "\n\tdef ",
    "\n    def ",
    "\n\n",
    "\n",
    " ",
    "",
)

_JAVASCRIPT: tuple[str, ...] = (
    "\nfunction ",
    "\nconst ",
    "\nlet ",
    "\nvar ",
    "\nclass ",
    "\nif ",
    "\nfor ",
    "\nwhile ",
    "\nswitch ",
    "\ncase ",
    "\ndefault ",
    "\n\n",
    "\n",
    " ",
    "",
)

_HTML: tuple[str, ...] = (
    "<body",
    "<div",
    "<p",
    "<br",
    "<li",
    "<h1",
    "<h2",
    "<h3",
    "<h4",
    "<h5",
    "<h6",
    "<span",
    "<table",
    "<tr",
    "<td",
    "<th",
    "<ul",
    "<ol",
    "<header",
    "<footer",
    "<nav",
    "<head",
    "<style",
    "<script",
    "<meta",
    "<title",
    "",
)

SEPARATORS: Mapping[ContentType, tuple[str, ...]] = MappingProxyType({
    ContentType.TEXT: _PROSE,
    ContentType.MARKDOWN: _MARKDOWN,
    ContentType.PYTHON: _PYTHON,
    ContentType.JAVASCRIPT: _JAVASCRIPT,
    ContentType.HTML: _HTML,
})


def get_separators(content_type: Union[ContentType, str] = ContentType.TEXT) -> tuple[str, ...]:
    """
    Look up the ordered separator tuple for a content type.

    Args:
        content_type: A ContentType member or its string value.

    Returns:
        Delimiters ordered from coarsest to finest.

    Raises:
        UnknownContentTypeError: If the tag has no profile.
    """
    try:
        key = ContentType(content_type)
    except ValueError as exc:
        raise UnknownContentTypeError(content_type) from exc
    return SEPARATORS[key]
