"""Attach console and file handlers to the ``hexview`` logger."""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .formatters import HumanFormatter, JsonFormatter
from .structured_logger import get_logger

PACKAGE_LOGGER = 'hexview'


def _stream_supports_color(stream) -> bool:
    if os.environ.get('NO_COLOR') or os.environ.get('TERM') == 'dumb':
        return False
    return hasattr(stream, 'isatty') and stream.isatty()


def setup_logging(config=None,
                  log_file: Optional[str] = None,
                  console: bool = True,
                  log_level: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``hexview`` logger from the ``logging`` config section.
    
    Args:
        config: Config instance (defaults to the package config)
        log_file: JSON-lines log file; falls back to ``logging.file``
        console: Whether to log human-readable lines to stderr
        log_level: Overrides ``logging.level``
        
    Returns:
        The configured package logger
    """
    if config is None:
        from ...config import config
    
    level_name = str(log_level or config.get('logging.level', 'INFO')).upper()
    level = getattr(logging, level_name, logging.INFO)
    
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    
    if console:
        use_colors = config.get('logging.use_colors')
        if use_colors is None:
            use_colors = _stream_supports_color(sys.stderr)
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(HumanFormatter(use_colors=use_colors))
        console_handler.setLevel(level)
        package_logger.addHandler(console_handler)
    
    log_file = log_file or config.get('logging.file')
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            str(path),
            maxBytes=config.get('logging.max_file_size', 10 * 1024 * 1024),
            backupCount=config.get('logging.backup_count', 3),
            encoding='utf-8'
        )
        if config.get('logging.use_json', True):
            file_handler.setFormatter(JsonFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s %(name)s: %(message)s'
            ))
        package_logger.addHandler(file_handler)
    
    get_logger(__name__).debug(
        f"Logging at {level_name} (console={console}, file={log_file or None})"
    )
    return package_logger
