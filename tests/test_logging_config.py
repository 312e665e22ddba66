import logging
from pathlib import Path

from chunkviz.logging_config import ROOT_LOGGER_NAME, get_logger, setup_logging


def test_get_logger_prefixes_namespace() -> None:
    assert get_logger("scripts.runner").name == "chunkviz.scripts.runner"


def test_get_logger_keeps_package_names() -> None:
    assert get_logger("chunkviz.pipeline").name == "chunkviz.pipeline"
    assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / "chunkviz.log"
    logger = setup_logging(logging.DEBUG, log_file=log_file)
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2

        get_logger("chunkviz.pipeline").debug("computed 3 chunks")
        for handler in logger.handlers:
            handler.flush()
        assert "computed 3 chunks" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_setup_logging_replaces_handlers() -> None:
    logger = setup_logging()
    logger = setup_logging()
    try:
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
