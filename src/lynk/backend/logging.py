"""Logging configuration for Lynk backend"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional


class ProjectOnlyFilter(logging.Filter):
    """Filter to only allow logs from lynk.* modules"""

    def filter(self, record):
        return record.name.startswith('lynk.')


def _rotating_handler(path: Path, level: int, formatter: logging.Formatter) -> TimedRotatingFileHandler:
    handler = TimedRotatingFileHandler(
        filename=path,
        when='midnight',
        interval=1,
        backupCount=30,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(log_dir: Optional[Path] = None, level: str = "INFO") -> None:
    """Setup logging configuration for Lynk backend

    Console output is always enabled at the given level. When log_dir is
    set, three files are written there as well:
    - debug.log: DEBUG+ logs from lynk.* modules only
    - info.log: INFO+ logs from all modules
    - error.log: ERROR+ logs from all modules

    Files are rotated daily at midnight, keeping 30 days of history.

    Args:
        log_dir: Directory for log files, None for console only
        level: Console log level name
    """
    log_format = '%(asctime)s.%(msecs)03d - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'
    formatter = logging.Formatter(log_format, datefmt=date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear existing handlers to avoid duplicate logs
    root_logger.handlers.clear()

    # ==================== Console Handler ====================
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.getLevelName(level.upper()))
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        # ==================== File Handlers ====================
        debug_handler = _rotating_handler(log_dir / "debug.log", logging.DEBUG, formatter)
        debug_handler.addFilter(ProjectOnlyFilter())
        root_logger.addHandler(debug_handler)

        root_logger.addHandler(_rotating_handler(log_dir / "info.log", logging.INFO, formatter))
        root_logger.addHandler(_rotating_handler(log_dir / "error.log", logging.ERROR, formatter))

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialized (level={level}, log_dir={log_dir})")
