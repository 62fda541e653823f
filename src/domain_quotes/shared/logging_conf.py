# src/domain_quotes/shared/logging_conf.py
"""
Logging Configuration - Logging Setup for the Quote CLI

Configures the root logger for command-line use. Library code only ever calls
``logging.getLogger(__name__)``; handlers are attached here, by the entry point.

Files that USE this module:
- domain_quotes.app (setup_logging before loading pricing data)

Files that this module USES:
- domain_quotes.config (settings for log destinations)
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level=logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    log_stdout: Optional[bool] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application-wide logging.

    Output goes to stderr (so it never mixes with a printed quote), to a
    rotating file, or both.

    Args:
        level: Logging level (default: logging.WARNING)
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files (file is domain_quotes.log)
        log_stdout: Stream logs to the console; defaults to settings.log_stdout
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup log files to keep (default: 5)
    """
    from domain_quotes.config import settings

    if log_stdout is None:
        log_stdout = settings.log_stdout

    handlers: list[logging.Handler] = []
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    if log_stdout:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        handlers.append(stream_handler)

    log_file_path: Optional[Path] = None
    if log_file or log_dir:
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file_path = log_dir / "domain_quotes.log"
        else:
            log_file_path = Path(log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        handlers = [logging.NullHandler()]

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(__name__)
    if log_file_path:
        logger.info("Logging configured: file=%s, level=%s", log_file_path, level)
    else:
        logger.info("Logging configured: console=%s, level=%s", log_stdout, level)
