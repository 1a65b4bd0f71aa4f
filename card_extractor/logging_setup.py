"""
Logging configuration for the card extractor.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    LEVEL_COLORS = {
        logging.DEBUG: 36,
        logging.INFO: 32,
        logging.WARNING: 33,
        logging.ERROR: 31,
        logging.CRITICAL: 35,
    }

    def format(self, record):
        # Work on a copy so the file handler keeps the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno)
        if color:
            record.levelname = f"\033[{color}m{record.levelname}\033[0m"
        return super().format(record)


def setup_logger(
    name: str = "card_extractor",
    level: str = "INFO",
    log_dir: Optional[str] = "logs"
) -> logging.Logger:
    """
    Configure logger with console and file handlers.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the log file, None to log to console only

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(ColoredFormatter(
        '%(asctime)s [%(levelname)s]: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path / "card_extractor.log", encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger


def log_progress(logger: logging.Logger, page_number: int, page_count: int, context: str = "Parsing"):
    """Log one finished page; DEBUG level except for the last page."""
    level = logging.INFO if page_number == page_count else logging.DEBUG
    logger.log(level, f"{context} page {page_number} of {page_count}")


def log_stats(logger: logging.Logger, stats_dict: Dict[str, int], title: str = "Summary", total_key: str = "Records"):
    """
    Log record counts, each as a share of the total.

    Args:
        logger: Logger instance
        stats_dict: Counts keyed by label, including total_key
        title: Heading line
        total_key: Key holding the number of records
    """
    total = stats_dict.get(total_key, 0)
    logger.info(f"--- {title} ---")
    logger.info(f"  {total_key}: {total}")
    for key, count in stats_dict.items():
        if key == total_key:
            continue
        share = f"{count / total:.0%}" if total else "n/a"
        logger.info(f"  {key}: {count}/{total} ({share})")
