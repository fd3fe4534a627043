"""Public logging API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration.

    `logger_levels` pins individual loggers (for example the window trace
    logger) to a level independent of the root level.
    """

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json
    logger_levels: tuple[tuple[str, str], ...] = ()
