import argparse
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

load_dotenv(ROOT / ".env")

from chunkviz.app import create_app
from chunkviz.config import ChunkVizConfig
from chunkviz.logging_config import setup_logging
from chunkviz.models import SplitterKind
from chunkviz.separators import ContentType
from chunkviz.service import ChunkVizService
import uvicorn


def run_chunk(
    config: ChunkVizConfig,
    text_path: str,
    chunk_size: int | None,
    chunk_overlap: int | None,
    splitter: str,
    content_type: str,
    output_path: str | None = None,
) -> None:
    service = ChunkVizService(config)
    params = service.build_parameters(
        chunk_size=chunk_size,
        chunk_overlap=chunk_overlap,
        splitter=splitter,
        content_type=content_type,
    )
    result = service.compute_from_file(text_path, params)
    stats = result.stats
    print(f"chunks: {stats.count}")
    print(f"average: {stats.average:.0f}")
    print(f"min/max: {stats.min}/{stats.max} ({stats.ratio_percent}%)")
    print(f"boundary_mismatches: {result.boundary_mismatch_count}")
    for warning in result.warnings:
        print(f"warning: {warning}")
    if output_path:
        Path(output_path).write_text(result.to_json(), encoding="utf-8")
        print(f"saved: {output_path}")


def run_server(config: ChunkVizConfig, host: str, port: int) -> None:
    app = create_app(config)
    uvicorn.run(app, host=host, port=port)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Chunk visualizer runner (chunk a text file or serve the API)."
    )
    parser.add_argument("--serve", action="store_true", help="Run FastAPI server")
    parser.add_argument("--host", default="127.0.0.1", help="Server host")
    parser.add_argument("--port", type=int, default=8002, help="Server port")
    parser.add_argument("--text", help="Path to a UTF-8 text file to chunk")
    parser.add_argument("--chunk-size", type=int, help="Characters per chunk")
    parser.add_argument("--overlap", type=int, help="Characters of overlap")
    parser.add_argument(
        "--splitter",
        choices=[s.value for s in SplitterKind],
        default=SplitterKind.RECURSIVE.value,
    )
    parser.add_argument(
        "--content-type",
        choices=[c.value for c in ContentType],
        default=ContentType.TEXT.value,
    )
    parser.add_argument("--output", help="Optional path for the result JSON")
    args = parser.parse_args()

    config = ChunkVizConfig.from_env()
    setup_logging(config.log_level_value)

    if args.serve:
        run_server(config, args.host, args.port)
        return

    if not args.text:
        parser.error("Provide --text or use --serve to run the API.")
    run_chunk(
        config,
        args.text,
        args.chunk_size,
        args.overlap,
        args.splitter,
        args.content_type,
        args.output,
    )


if __name__ == "__main__":
    main()
