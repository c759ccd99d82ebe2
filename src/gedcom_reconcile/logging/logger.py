"""
Centralized logging for GEDCOM Reconcile.

Key behaviors
-------------
* ``get_logger`` is the only way modules obtain a logger.
* Master log file (default: ``logs/gedcom_reconcile.log``) plus one log file
  per module, e.g. ``logs/gedcom_reconcile_matching_engine.log``.
* Console output at INFO, or DEBUG when ``debug: true`` is configured.
* Optional size-based rotation controlled by ``logging.rotate``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path

from gedcom_reconcile.config import get_config

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

BASE_LOGGER_NAME = "gedcom_reconcile"
PROJECT_ROOT = Path(__file__).resolve().parents[3]
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_base_configured: bool = False
_effective_level: int = logging.INFO
_rotate_logs: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _ensure_log_dir() -> Path:
    """Resolve the log directory from configuration and create it."""
    cfg = get_config()

    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
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
    """Attach the master file handler and console handler once."""
    global _base_configured, _effective_level, _rotate_logs

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    master_name = cfg.logging.get("file", f"{BASE_LOGGER_NAME}.log")

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    debug_enabled = bool(getattr(cfg, "debug", False))
    _effective_level = (
        logging.DEBUG if debug_enabled else getattr(logging, level_name, logging.INFO)
    )

    log_dir = _ensure_log_dir()
    base_logger.setLevel(_effective_level)
    base_logger.propagate = False
    base_logger.addHandler(_build_file_handler(log_dir / master_name, _effective_level))

    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    if any(getattr(h, "is_module_handler", False) for h in logger.handlers):
        return

    path = _ensure_log_dir() / f"{module_name.replace('.', '_')}.log"
    handler = _build_file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger wired to the project-wide handlers.

    Names outside the ``gedcom_reconcile`` namespace (e.g. ``"main"``) are
    nested under it so they still reach the console and master log.
    """
    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)

    if logger is not base_logger:
        _attach_module_handler(logger, logger_name)
        logger.propagate = True

    return logger
