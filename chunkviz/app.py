from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from . import __version__
from .config import ChunkVizConfig
from .exceptions import (
    InvalidParameterError,
    ReconstructionMismatchError,
    UnknownContentTypeError,
    format_error_chain,
)
from .highlight import build_stylesheet
from .logging_config import get_logger
from .models import ChunkRequest, PipelineResult, SampleResponse, SplitterKind
from .separators import ContentType
from .service import ChunkVizService

logger = get_logger(__name__)


def create_app(config: ChunkVizConfig | None = None) -> FastAPI:
    service = ChunkVizService(config)
    app = FastAPI(
        title="Chunk Visualizer",
        version=__version__,
        description="Split text with fixed-width or recursive splitters and highlight chunks and overlaps.",
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/content-types")
    def content_types() -> dict:
        return {
            "content_types": [c.value for c in ContentType],
            "splitters": [s.value for s in SplitterKind],
        }

    @app.get("/samples/{content_type}", response_model=SampleResponse)
    def sample(content_type: str) -> SampleResponse:
        try:
            text = service.sample(content_type)
        except UnknownContentTypeError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return SampleResponse(content_type=ContentType(content_type), text=text)

    @app.get("/stylesheet.css")
    def stylesheet() -> Response:
        return Response(content=build_stylesheet(), media_type="text/css")

    @app.post("/chunk", response_model=PipelineResult)
    def chunk(request: ChunkRequest) -> PipelineResult:
        try:
            params = service.build_parameters(
                chunk_size=request.chunk_size,
                chunk_overlap=request.chunk_overlap,
                splitter=request.splitter,
                content_type=request.content_type,
                clamp=request.clamp_overlap,
            )
            return service.compute(request.text, params)
        except InvalidParameterError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except ReconstructionMismatchError as exc:
            logger.error(format_error_chain(exc))
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    return app


app = create_app(ChunkVizConfig.from_env())
