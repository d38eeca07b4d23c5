"""
Logging setup shared by every ``craft_beer`` module.

Behaviour
---------
* ``get_logger`` is the only way modules obtain a logger, so every logger
  hangs off the ``craft_beer`` base logger and shares its handlers.
* The base logger writes to the console and to a master log file
  (``logs/craft_beer.log`` unless ``config/craft_beer.yml`` says otherwise).
* ``logging.rotate`` switches the file handlers to size-based rotation.
* ``logging.per_module`` gives each module its own extra log file.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from craft_beer.config import get_config

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

BASE_LOGGER_NAME = "craft_beer"
PROJECT_ROOT = Path(__file__).resolve().parents[3]
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_level: int = logging.INFO
_rotate: bool = False
_per_module: bool = False


# -----------------------------------------------------------------------------
# Handler construction
# -----------------------------------------------------------------------------

def _log_dir() -> Path:
    """Return the configured log directory, creating it when needed."""
    cfg = get_config()
    configured = cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs"

    log_dir = Path(configured)
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def _file_handler(path: Path) -> logging.Handler:
    if _rotate:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(_level)
    handler.setFormatter(_formatter())
    return handler


def _setup_base() -> Logger:
    """Attach console and master-file handlers to the base logger (once)."""
    global _base_configured, _level, _rotate, _per_module

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base

    cfg = get_config()
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    _level = logging.DEBUG if cfg.debug else getattr(logging, level_name, logging.INFO)
    _rotate = bool(cfg.logging.get("rotate", False))
    _per_module = bool(cfg.logging.get("per_module", False))

    base.setLevel(_level)
    base.propagate = False

    master = _log_dir() / cfg.logging.get("file", "craft_beer.log")
    base.addHandler(_file_handler(master))

    console = StreamHandler()
    console.setLevel(logging.DEBUG if cfg.debug else logging.WARNING)
    console.setFormatter(_formatter())
    base.addHandler(console)

    _base_configured = True
    return base


def _has_module_file(logger: Logger) -> bool:
    return any(getattr(h, "craft_beer_module_file", False) for h in logger.handlers)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger wired to the shared ``craft_beer`` handlers.

    Names outside the ``craft_beer`` namespace are moved under it so their
    records still reach the base handlers, e.g. ``"main"`` becomes
    ``"craft_beer.main"``.
    """
    base = _setup_base()

    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    if logger_name == BASE_LOGGER_NAME:
        _logger_cache[logger_name] = base
        return base

    logger = logging.getLogger(logger_name)
    logger.setLevel(_level)
    logger.propagate = True

    if _per_module and not _has_module_file(logger):
        handler = _file_handler(_log_dir() / f"{logger_name.replace('.', '_')}.log")
        handler.craft_beer_module_file = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    _logger_cache[logger_name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Names handed out by ``get_logger`` so far."""
    return list(_logger_cache.keys())
