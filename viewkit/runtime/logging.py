"""Logging pipeline for list components and the host application."""

from __future__ import annotations

import json
import logging
import queue
from collections.abc import Mapping
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from viewkit.api.logging import LoggingConfig
from viewkit.runtime.config import load_logging_config

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_queue_listener: QueueListener | None = None

# LogRecord attributes that are not caller-supplied `extra` fields.
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; `extra` values land under `fields`."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES}
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_viewkit_logging(config: LoggingConfig) -> None:
    """Replace root handlers; file output is written off-thread through a queue."""
    global _queue_listener

    shutdown_viewkit_logging()
    handlers = _build_handlers(config)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(_level(config.level_name))
    for name, level_name in config.logger_levels:
        logging.getLogger(name).setLevel(_level(level_name))

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _queue_listener = QueueListener(records, *handlers, respect_handler_level=True)
    _queue_listener.start()


def setup_viewkit_logging(*, env: Mapping[str, str] | None = None) -> None:
    """Configure logging from the environment unless the host already did."""
    if logging.getLogger().handlers:
        return
    configure_viewkit_logging(load_logging_config(env=env))


def shutdown_viewkit_logging() -> None:
    """Flush and stop the background file writer, if one is running."""
    global _queue_listener

    if _queue_listener is None:
        return
    _queue_listener.stop()
    for handler in _queue_listener.handlers:
        handler.close()
    _queue_listener = None


def get_viewkit_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(_formatter(config.console_format))
    handlers: list[logging.Handler] = [console]
    if config.file_path:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_formatter(config.file_format))
        handlers.append(file_handler)
    return handlers


def _formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)


def _level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO
