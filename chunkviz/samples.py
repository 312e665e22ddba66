"""Sample documents per content type, used to pre-fill the text input."""

from typing import Union

from .exceptions import UnknownContentTypeError
from .separators import ContentType

_PROSE = """\
Chunking is the step that decides what a retrieval system can ever find. A question can only be answered from the pieces the splitter produced, so a sentence cut in half is a fact that may never come back.

The simplest splitter counts characters. It walks through the text in windows of a fixed size and cuts wherever the window ends, in the middle of a word if need be. It is fast and predictable, and it knows nothing about the text.

A recursive splitter tries to respect structure. It first looks for paragraph breaks, then line breaks, then sentence ends, then spaces. Only when nothing else works does it cut between single characters.

Overlap repeats the end of one chunk at the start of the next. It costs storage, but it gives a sentence near a boundary a second chance to appear whole.

Try a few sizes and watch where the colours change."""

_MARKDOWN = """\
# Chunk Visualizer

Explore how different splitters cut the same document.

## Getting started

1. Paste some text into the input box
2. Pick a splitter and a chunk size
3. Move the overlap slider and watch the highlighted spans

## Splitters

- **Fixed width** cuts every N characters.
- **Recursive** prefers headings, blank lines and spaces.

```
chunk_size = 200
chunk_overlap = 20
```

---

## Notes

Overlap is shown in its own colour so you can see what each chunk repeats.
"""

_PYTHON = """\
from dataclasses import dataclass


@dataclass
class Window:
    start: int
    end: int


def windows(length, size, overlap):
    step = size - overlap
    offset = 0
    while offset < length:
        end = min(offset + size, length)
        yield Window(offset, end)
        if end >= length:
            break
        offset += step


class Splitter:
    def __init__(self, size, overlap=0):
        self.size = size
        self.overlap = overlap

    def split(self, text):
        return [text[w.start:w.end] for w in windows(len(text), self.size, self.overlap)]
"""

_JAVASCRIPT = """\
import { RecursiveSplitter } from "./splitter.js";

const text = `Some considerations include:

- Do you deploy your backend and frontend together?
- Do you keep your database next to your backend?

## Deployment

Pick the option that fits your team.`;

function summarize(chunks) {
  const sizes = chunks.map((c) => c.length);
  return { count: sizes.length, max: Math.max(...sizes) };
}

const splitter = new RecursiveSplitter({ chunkSize: 50, chunkOverlap: 5 });
const chunks = splitter.split(text);

console.log(summarize(chunks));
"""

_HTML = """\
<!doctype html>
<html>
<head>
<title>Chunk Visualizer</title>
</head>
<body>
<h1>Chunk Visualizer</h1>
<p>Paste a document, choose a splitter and compare the results.</p>
<div class="controls">
<label>Chunk size <input type="range" min="1" max="2000"></label>
<label>Overlap <input type="range" min="0" max="1000"></label>
</div>
<ul>
<li>Fixed width</li>
<li>Recursive</li>
</ul>
</body>
</html>
"""

SAMPLES: dict[ContentType, str] = {
    ContentType.TEXT: _PROSE,
    ContentType.MARKDOWN: _MARKDOWN,
    ContentType.PYTHON: _PYTHON,
    ContentType.JAVASCRIPT: _JAVASCRIPT,
    ContentType.HTML: _HTML,
}


def get_sample(content_type: Union[ContentType, str] = ContentType.TEXT) -> str:
    """Return the sample document for a content type."""
    try:
        return SAMPLES[ContentType(content_type)]
    except ValueError as exc:
        raise UnknownContentTypeError(content_type) from exc
