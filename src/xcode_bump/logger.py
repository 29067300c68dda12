"""Central logging module for xcode-bump.

Provides a configurable logger writing to stderr and, optionally, to a
timestamped log file.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logger(
    name: str = "xcode_bump",
    level: int = None,
    log_file: Optional[Path] = None,
    console_output: bool = True,
) -> logging.Logger:
    """Configures and returns a logger.

    Args:
        name: Name of the logger (default: "xcode_bump").
        level: Logging level. If None, config.logging.level is used.
        log_file: Optional path to a log file. If None, config.logging.file
                 is used; when that is empty too, no file is written.
        console_output: If True, warnings and errors also go to stderr.

    Returns:
        Configured logger.
    """
    if level is None or log_file is None:
        from .config import Config, get_config
        from .exceptions import ConfigError

        try:
            config = get_config()
        except ConfigError:
            # Reported by the command line; log with defaults meanwhile
            config = Config(None)

        if level is None:
            level_str = config.logging.level.upper()
            level = getattr(logging, level_str, logging.WARNING)

        if log_file is None and config.logging.file:
            base_log_path = Path(config.logging.file)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M")
            log_file = base_log_path.parent / f"{base_log_path.stem}_{timestamp}.log"

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "xcode_bump") -> logging.Logger:
    """Returns an existing logger or creates a new one.

    Modules call this at import time; the first call configures the logger.

    Args:
        name: Name of the logger (default: "xcode_bump").

    Returns:
        Logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger = setup_logger(name)

    return logger
