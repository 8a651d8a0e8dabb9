# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
import logging.handlers
import sys

import pytest

from flowblocks._logging_config import BLOCK_LOG_BACKUP_COUNT, BLOCK_LOG_FILE, BLOCK_LOG_MAX_BYTES, init_basic_logging


@pytest.fixture
def root_logger():
    logger = logging.getLogger()
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


def test_init_basic_logging(root_logger, tmp_path):
    log_dir = tmp_path / "logs"

    logger = init_basic_logging(log_dir=str(log_dir), root_level=logging.DEBUG)
    logging.getLogger("flowblocks.test").debug("logged to file")

    assert logger is root_logger
    assert logger.level == logging.DEBUG
    rotating = [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(rotating) == 1
    rotating[0].flush()
    assert "logged to file" in (log_dir / BLOCK_LOG_FILE).read_text()


def test_init_basic_logging_without_console(root_logger):
    handler_count = len(root_logger.handlers)

    init_basic_logging(enable_console_logging=False)

    assert len(root_logger.handlers) == handler_count


def test_module_docstring():
    from flowblocks import _logging_config

    assert _logging_config.__doc__.startswith("Default logging setup")


def test_init_basic_logging_reuses_log_dir(root_logger, tmp_path):
    init_basic_logging(log_dir=str(tmp_path), enable_console_logging=False)
    init_basic_logging(log_dir=str(tmp_path), enable_console_logging=False)

    rotating = [h for h in root_logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(rotating) == 2
    assert all(h.baseFilename == str(tmp_path / BLOCK_LOG_FILE) for h in rotating)
    assert all(h.maxBytes == BLOCK_LOG_MAX_BYTES and h.backupCount == BLOCK_LOG_BACKUP_COUNT for h in rotating)


def test_init_basic_logging_console(root_logger):
    init_basic_logging(root_level=logging.WARNING)

    console = [h for h in root_logger.handlers if type(h) is logging.StreamHandler and h.stream is sys.stdout]
    assert len(console) == 1
    assert console[0].level == logging.WARNING
