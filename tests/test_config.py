import logging

from chunkviz.config import ChunkVizConfig


def test_defaults() -> None:
    config = ChunkVizConfig()
    assert config.max_input_chars == 100_000
    assert config.default_chunk_size == 200
    assert config.default_overlap == 20
    assert config.count_tokens is False
    assert config.log_level_value == logging.INFO


def test_from_env_without_variables(monkeypatch) -> None:
    for name in (
        "CHUNKVIZ_MAX_INPUT_CHARS",
        "CHUNKVIZ_DEFAULT_CHUNK_SIZE",
        "CHUNKVIZ_DEFAULT_OVERLAP",
        "CHUNKVIZ_COUNT_TOKENS",
        "CHUNKVIZ_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    assert ChunkVizConfig.from_env() == ChunkVizConfig()


def test_from_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("CHUNKVIZ_MAX_INPUT_CHARS", "5000")
    monkeypatch.setenv("CHUNKVIZ_DEFAULT_CHUNK_SIZE", "120")
    monkeypatch.setenv("CHUNKVIZ_DEFAULT_OVERLAP", "12")
    monkeypatch.setenv("CHUNKVIZ_COUNT_TOKENS", "yes")
    monkeypatch.setenv("CHUNKVIZ_LOG_LEVEL", "debug")

    config = ChunkVizConfig.from_env()
    assert config.max_input_chars == 5000
    assert config.default_chunk_size == 120
    assert config.default_overlap == 12
    assert config.count_tokens is True
    assert config.log_level_value == logging.DEBUG


def test_count_tokens_false_values(monkeypatch) -> None:
    monkeypatch.setenv("CHUNKVIZ_COUNT_TOKENS", "off")
    assert ChunkVizConfig.from_env().count_tokens is False


def test_unknown_log_level_falls_back_to_info() -> None:
    assert ChunkVizConfig(log_level="chatty").log_level_value == logging.INFO
