import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# stdout carries the MCP protocol, so handlers only ever write to stderr or files
_settings = {"level": logging.INFO, "log_dir": None}
_loggers: dict[str, Optional[str]] = {}


def _add_file_handler(logger: logging.Logger, filename: str) -> None:
    file_handler = logging.FileHandler(os.path.join(_settings["log_dir"], filename))
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """Apply level and log directory to every logger made by get_logger."""
    resolved = logging.getLevelName(level.upper())
    _settings["level"] = resolved if isinstance(resolved, int) else logging.INFO

    if log_dir and log_dir != _settings["log_dir"]:
        os.makedirs(log_dir, exist_ok=True)
        _settings["log_dir"] = log_dir
        for name, filename in _loggers.items():
            if filename:
                _add_file_handler(logging.getLogger(name), filename)

    for name in _loggers:
        logging.getLogger(name).setLevel(_settings["level"])


def get_logger(name: str, filename: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(_settings["level"])

    if logger.handlers:
        return logger  # avoid duplicate handlers

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stream_handler)

    if _settings["log_dir"] and filename:
        _add_file_handler(logger, filename)

    logger.propagate = False
    _loggers[name] = filename
    return logger
