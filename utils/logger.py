from __future__ import annotations

import logging
import os

_configured: set[str] = set()


def _level_from_env() -> int:
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    return getattr(logging, level, logging.INFO)


def get_logger(name: str = "ai_indigo") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_level_from_env())
        _configured.add(name)
    return logger


def apply_log_level() -> None:
    """Re-read LOG_LEVEL for every logger handed out so far (e.g. after a .env load)."""
    level = _level_from_env()
    for name in _configured:
        logging.getLogger(name).setLevel(level)
