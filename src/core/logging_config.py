"""Logging setup for the service. Call setup_logging() once at startup."""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "nim"


def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    # Set the root logger to WARNING to suppress verbose logs from dependencies
    logging.getLogger().setLevel(logging.WARNING)

    nim_logger = logging.getLogger(LOGGER_NAME)
    nim_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Repeated calls (app factory in tests) must not stack handlers
    for handler in list(nim_logger.handlers):
        nim_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    nim_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        nim_logger.addHandler(file_handler)

    return nim_logger
