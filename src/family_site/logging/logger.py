"""
Centralized logging configuration for the family site.

Key behaviors
-------------
* ``get_logger`` is the single entry point so handlers and formats match.
* One master log file (default ``logs/family_site.log``) plus one file per module.
* Console output at INFO, or DEBUG when ``debug: true`` in ``config/family_site.yml``.
* Optional size-based rotation (``logging.rotate``).
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from family_site.config import PROJECT_ROOT, get_config

# -----------------------------------------------------------------------------
# Paths and formats
# -----------------------------------------------------------------------------

BASE_LOGGER_NAME = "family_site"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_rotate_logs: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _log_dir() -> Path:
    """Resolve and create the configured log directory."""
    cfg = get_config()
    raw = cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs"
    log_dir = Path(raw)
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    if _rotate_logs:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=2 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Attach the master file and console handlers to the base logger, once."""
    global _base_configured, _effective_level, _rotate_logs

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    master_name = cfg.logging.get("file", "family_site.log")

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    configured_level = getattr(logging, level_name, logging.INFO)
    debug_enabled = bool(getattr(cfg, "debug", False))
    _effective_level = logging.DEBUG if debug_enabled else configured_level

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False
    base_logger.addHandler(_build_file_handler(_log_dir() / master_name, _effective_level))

    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _has_module_handler(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    path = _log_dir() / f"{module_name.replace('.', '_')}.log"
    handler = _build_file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger wired to the project-wide handlers.

    Loggers below ``family_site`` propagate to the base console and master
    handlers and also write to ``logs/<module>.log``.
    """
    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)

    if logger is not base_logger:
        if not _has_module_handler(logger):
            _attach_module_handler(logger, logger_name)
        logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def reset_logging() -> None:
    """Close and detach every handler this module created."""
    global _base_configured

    for logger in [logging.getLogger(BASE_LOGGER_NAME), *_logger_cache.values()]:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    _logger_cache.clear()
    _base_configured = False


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
