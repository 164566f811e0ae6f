from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional, Union

from .context import RequestContextFilter
from .formatter import ConsoleFormatter, JSONFormatter
from .logger import register_levels, to_level

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    level: Union[str, int, None] = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "pubg.jsonl",
    console: Optional[bool] = None,
    max_bytes: int = 5_000_000,
    backup_count: int = 3,
) -> None:
    """
    Configure the root logger for command-line use.

    Console output goes to stderr (``LOG_CONSOLE`` env var when ``console``
    is None, default on). With ``log_dir`` set, records are also written as
    JSON lines to a rotating file through a background queue listener.
    """
    global _listener
    shutdown_logging()
    register_levels()

    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    if console is None:
        console = os.getenv("LOG_CONSOLE", "true").strip().lower() == "true"
    if console:
        handler = logging.StreamHandler()
        handler.setLevel(lvl)
        handler.addFilter(RequestContextFilter())
        handler.setFormatter(ConsoleFormatter(color=handler.stream.isatty()))
        root.addHandler(handler)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        queue_handler = QueueHandler(q)
        queue_handler.addFilter(RequestContextFilter())
        root.addHandler(queue_handler)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        for handler in _listener.handlers:
            handler.close()
        _listener = None
