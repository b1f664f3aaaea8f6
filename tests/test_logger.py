import logging

import pytest

from utils.logger import setup_logger


@pytest.fixture
def clean_store_logger():
    logger = logging.getLogger("store")
    saved = (logger.handlers[:], logger.level)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])


def test_console_only_by_default(clean_store_logger):
    logger = setup_logger(level="INFO", log_dir="")
    assert logger is clean_store_logger
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_repeated_setup_keeps_handlers(clean_store_logger):
    setup_logger(level="INFO", log_dir="")
    logger = setup_logger(level="INFO", log_dir="")
    assert len(logger.handlers) == 1


def test_rotating_file_when_dir_given(clean_store_logger, tmp_path):
    logger = setup_logger(level="INFO", log_dir=str(tmp_path / "logs"))
    assert len(logger.handlers) == 2
    assert (tmp_path / "logs" / "store.log").exists()
