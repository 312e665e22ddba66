from dataclasses import dataclass
import logging
import os


@dataclass
class ChunkVizConfig:
    max_input_chars: int = 100_000
    default_chunk_size: int = 200
    default_overlap: int = 20
    count_tokens: bool = False
    log_level: str = "INFO"

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def from_env(cls) -> "ChunkVizConfig":
        def _int(name: str, default: int) -> int:
            value = os.environ.get(name)
            return int(value) if value else default

        def _bool(name: str, default: bool) -> bool:
            value = os.environ.get(name)
            if not value:
                return default
            return value.strip().lower() in ("1", "true", "yes", "on")

        return cls(
            max_input_chars=_int("CHUNKVIZ_MAX_INPUT_CHARS", cls.max_input_chars),
            default_chunk_size=_int("CHUNKVIZ_DEFAULT_CHUNK_SIZE", cls.default_chunk_size),
            default_overlap=_int("CHUNKVIZ_DEFAULT_OVERLAP", cls.default_overlap),
            count_tokens=_bool("CHUNKVIZ_COUNT_TOKENS", cls.count_tokens),
            log_level=os.environ.get("CHUNKVIZ_LOG_LEVEL", cls.log_level),
        )
