"""
Logger Configuration Module

Handles logging setup for search operations. Logs go to files because stdout
carries the MCP protocol.
"""

import logging
from pathlib import Path


def create_logger(log_dir: str = "logs", level: str = "INFO") -> logging.Logger:
    # Create logs directory if it doesn't exist
    Path(log_dir).mkdir(parents=True, exist_ok=True)

    search_logger = logging.getLogger("efficient_search")
    search_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Create file handler for search logs
    file_handler = logging.FileHandler(
        Path(log_dir) / "efficient_search.log", encoding="utf-8"
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    )
    search_logger.addHandler(file_handler)

    return search_logger


search_logger: logging.Logger | None = None


def setup_logging(log_dir: str = "logs", level: str = "INFO") -> logging.Logger:
    global search_logger
    if search_logger is None:
        search_logger = create_logger(log_dir, level)
    return search_logger
