"""Logging setup for the Roman numeral service."""

import copy
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Union

from uvicorn.config import LOGGING_CONFIG

APP_LOGGER = "roman_numeral"
# uvicorn writes one line per request here.
HTTP_LOGGER = "uvicorn.access"

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_HTTP_FORMAT = "%(asctime)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _file_handler(path: Path, level: int, fmt: logging.Formatter) -> logging.FileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(path, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(fmt)
    return fh


def setup_logger(
    name: str = APP_LOGGER,
    level: Union[int, str] = logging.INFO,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure and return the application logger.

    Args:
        name: Logger name.
        level: Logging level (int or name such as "DEBUG").
        log_dir: Optional directory for combined.log and error.log. If None,
            logs go to stderr only.

    Returns:
        Configured logger.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    log.setLevel(level)
    fmt = logging.Formatter(_FORMAT, datefmt=_DATEFMT)

    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(fmt)
    log.addHandler(h)

    if log_dir:
        log_dir = Path(log_dir)
        log.addHandler(_file_handler(log_dir / "combined.log", logging.NOTSET, fmt))
        log.addHandler(_file_handler(log_dir / "error.log", logging.ERROR, fmt))

    return log


def setup_http_logger(log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Send uvicorn's access log to http.log.

    The access logger does not propagate, so access lines stay out of the
    application log. Calling this twice with the same directory adds one file
    handler only.
    """
    log = logging.getLogger(HTTP_LOGGER)
    log.setLevel(logging.INFO)
    log.propagate = False
    if not log_dir:
        return log

    path = (Path(log_dir) / "http.log").resolve()
    for h in log.handlers:
        if isinstance(h, logging.FileHandler) and Path(h.baseFilename) == path:
            return log
    fmt = logging.Formatter(_HTTP_FORMAT, datefmt=_DATEFMT)
    log.addHandler(_file_handler(path, logging.INFO, fmt))
    return log


def uvicorn_log_config(log_dir: Optional[Path] = None) -> dict[str, Any]:
    """
    uvicorn's default logging config, plus http.log for the access logger.

    uvicorn.run() applies its log config after the app is imported, which
    replaces handlers added by setup_http_logger, so main() passes this instead.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    if not log_dir:
        return config

    path = Path(log_dir) / "http.log"
    path.parent.mkdir(parents=True, exist_ok=True)
    config["formatters"]["access_file"] = {"format": _HTTP_FORMAT, "datefmt": _DATEFMT}
    config["handlers"]["access_file"] = {
        "class": "logging.FileHandler",
        "formatter": "access_file",
        "filename": str(path),
        "encoding": "utf-8",
    }
    config["loggers"]["uvicorn.access"]["handlers"].append("access_file")
    return config


def get_logger(name: str = APP_LOGGER) -> logging.Logger:
    """Return the application logger. Use after setup_logger has been called."""
    return logging.getLogger(name)
