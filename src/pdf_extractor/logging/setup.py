"""Logging for the extractor: JSON run log on disk, text progress on the console.

Every extraction logs its page walk (document loaded, per-page progress at
DEBUG, per-page image read failures, final counts) through module loggers.
``setup_logging`` routes those records to two places:

    1. ``<log_dir>/extractor.log`` -- JSON lines, DEBUG and up, rotated by size
    2. the console (stderr) -- plain text, INFO and up by default

The CLI lowers the console to WARNING when ``--json`` is given so stdout
carries only the JSON result; the log file still receives everything.
"""

import logging
import logging.handlers
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter

LOG_FILENAME = "extractor.log"


def setup_logging(
    log_dir: str = "logs",
    log_level_file: int = logging.DEBUG,
    log_level_console: int = logging.INFO,
    max_bytes: int = 10_485_760,  # 10MB
    backup_count: int = 5,
) -> Path:
    """Route extractor logs to the JSON run log and the console.

    Call once before the first extraction. Calling again (a second CLI run in
    the same process) replaces the previous handlers instead of stacking them.

    Args:
        log_dir: Directory for log files.
        log_level_file: Logging level for the file handler (default DEBUG).
        log_level_console: Console threshold; the CLI passes WARNING for --json.
        max_bytes: Maximum size per log file before rotation (default 10MB).
        backup_count: Number of rotated backup files to keep (default 5).

    Returns:
        Path of the JSON run log.
    """
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    log_path = Path(log_dir) / LOG_FILENAME

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything; handlers filter

    # Clear any existing handlers to prevent duplicates if called multiple times
    root_logger.handlers.clear()

    # --- File handler: JSON format, rotating ---
    file_handler = logging.handlers.RotatingFileHandler(
        filename=str(log_path),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level_file)

    json_formatter = JsonFormatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "component",
        },
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    file_handler.setFormatter(json_formatter)

    # --- Console handler: human-readable text ---
    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level_console)

    text_formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(text_formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    return log_path
