from pathlib import Path
from typing import Optional, Union

from .config import ChunkVizConfig
from .logging_config import get_logger
from .models import ChunkParameters, PipelineResult, SplitterKind
from .pipeline import clamp_overlap, compute
from .samples import get_sample
from .separators import ContentType
from .splitters import validate_parameters

logger = get_logger(__name__)


class ChunkVizService:
    def __init__(self, config: ChunkVizConfig | None = None):
        self.config = config or ChunkVizConfig()

    def build_parameters(
        self,
        chunk_size: Optional[int] = None,
        chunk_overlap: Optional[int] = None,
        splitter: Union[SplitterKind, str] = SplitterKind.RECURSIVE,
        content_type: Union[ContentType, str] = ContentType.TEXT,
        clamp: bool = False,
    ) -> ChunkParameters:
        size = self.config.default_chunk_size if chunk_size is None else chunk_size
        overlap = self.config.default_overlap if chunk_overlap is None else chunk_overlap
        if clamp:
            overlap = clamp_overlap(size, overlap)
        validate_parameters(size, overlap)
        return ChunkParameters(
            chunk_size=size,
            chunk_overlap=overlap,
            splitter=splitter,
            content_type=content_type,
        )

    def compute(self, text: str, params: ChunkParameters) -> PipelineResult:
        return compute(
            text,
            params,
            max_input_chars=self.config.max_input_chars,
            include_tokens=self.config.count_tokens,
        )

    def compute_from_file(self, path: str, params: ChunkParameters) -> PipelineResult:
        text = Path(path).read_text(encoding="utf-8")
        logger.info(f"Loaded {len(text)} characters from {path}")
        return self.compute(text, params)

    def sample(self, content_type: Union[ContentType, str] = ContentType.TEXT) -> str:
        return get_sample(content_type)
