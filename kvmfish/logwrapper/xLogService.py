from __future__ import annotations

import logging
import logging.config
import os
from typing import Any, Dict, Optional

from .config_loader import load_config
from .services.handlers import DATE_FORMAT, LOG_FORMAT, InMemoryLogHandler

_MEMORY_HANDLER: Optional[InMemoryLogHandler] = None


def build_logging_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """dictConfig for the root logger plus the kvmfish module loggers."""
    handlers: Dict[str, Dict[str, Any]] = {
        "memory": {
            "()": InMemoryLogHandler,
            "maxlen": int(cfg.get("buffer_size", 1000)),
            "level": "DEBUG",
            "formatter": "default",
        },
        "console": {
            "class": "logging.StreamHandler",
            "level": str(cfg.get("console_level", "INFO")).upper(),
            "stream": "ext://sys.stdout",
            "formatter": "default",
        },
    }
    path = str(cfg.get("file_path") or "")
    if path:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "filename": path,
            "maxBytes": int(cfg.get("rotate_bytes", 2 * 1024 * 1024)),
            "backupCount": int(cfg.get("backup_count", 5)),
            "encoding": "utf-8",
            "formatter": "default",
        }
    # module loggers only set a level; records still reach the root handlers
    loggers = {
        name: {"level": str(level).upper()}
        for name, level in (cfg.get("module_levels") or {}).items()
    }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT}},
        "handlers": handlers,
        "loggers": loggers,
        "root": {"level": "DEBUG", "handlers": list(handlers)},
    }


def init_logging(overrides: Optional[Dict[str, Any]] = None) -> None:
    """Configure logging once per process; later calls are no-ops."""
    global _MEMORY_HANDLER
    if _MEMORY_HANDLER is not None and _MEMORY_HANDLER in logging.getLogger().handlers:
        return

    cfg = load_config(overrides=overrides)
    path = str(cfg.get("file_path") or "")
    if path and os.path.dirname(path):
        os.makedirs(os.path.dirname(path), exist_ok=True)
    logging.config.dictConfig(build_logging_config(cfg))

    _MEMORY_HANDLER = next(
        (h for h in logging.getLogger().handlers if isinstance(h, InMemoryLogHandler)), None
    )
    logging.getLogger("logwrapper").debug("logging configured: %s", cfg.get("module_levels"))


def get_memory_handler() -> Optional[InMemoryLogHandler]:
    return _MEMORY_HANDLER


def get_router():
    from .api.router import router
    return router
