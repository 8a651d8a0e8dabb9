# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Default logging setup for hosts (or local scripts) running blocks outside of a managed environment.

Blocks themselves only log through their module loggers ('flowblocks.*'), they never configure handlers.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

BLOCK_LOG_FILE = "flowblocks.log"
BLOCK_LOG_MAX_BYTES = 5000
BLOCK_LOG_BACKUP_COUNT = 5

LOG_DATE_FORMAT = "%m/%d/%Y %I:%M:%S %p"
LOG_FORMAT = "%(levelname)s | %(asctime)-15s | %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(name)-13s: %(levelname)-8s %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _block_log_file_handler(log_dir: str) -> logging.Handler:
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    # DEBUG here, the root logger level decides what reaches the file
    handler = logging.handlers.RotatingFileHandler(
        filename=str(log_path / BLOCK_LOG_FILE), maxBytes=BLOCK_LOG_MAX_BYTES, backupCount=BLOCK_LOG_BACKUP_COUNT
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def init_basic_logging(log_dir=None, enable_console_logging=True, root_level=logging.INFO):
    """Attaches the console (stdout) and rotating file ('<log_dir>/flowblocks.log') handlers to the root logger.

    :param log_dir: directory for the rotating log file, no file logging if None
    :param enable_console_logging: log to stdout at 'root_level'
    :param root_level: level of the root logger
    :return: root logger
    """
    logger = logging.getLogger()
    logger.setLevel(root_level)

    if enable_console_logging:
        logger.addHandler(_console_handler(root_level))

    if log_dir:
        logger.addHandler(_block_log_file_handler(log_dir))

    # no-op if handlers were attached above
    logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT, level=root_level)

    return logger
