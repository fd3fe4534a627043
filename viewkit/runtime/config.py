"""Centralized list-runtime configuration sourced from environment."""

from __future__ import annotations

import math
import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import Mapping

from viewkit.api.logging import LoggingConfig

CLICK_MODES: tuple[str, ...] = ("toggle", "exclusive")
LOG_FORMATS: tuple[str, ...] = ("text", "json")
WINDOW_TRACE_LOGGER = "viewkit.ui_runtime.virtual_list"


@dataclass(frozen=True, slots=True)
class ListConfig:
    overscan: int
    item_height: float
    frame_interval_ms: float
    click_mode: str
    log_level: str
    window_trace_enabled: bool = False


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _number[TNumber: (int, float)](
    name: str,
    default: TNumber,
    parse: Callable[[str], TNumber],
    minimum: TNumber | None,
    env: Mapping[str, str] | None,
) -> TNumber:
    raw = _raw(name, env=env)
    try:
        value = default if raw is None else parse(raw.strip())
    except ValueError:
        value = default
    if not math.isfinite(value):
        value = default
    return value if minimum is None else max(minimum, value)


def _int(name: str, default: int, *, minimum: int | None = None, env: Mapping[str, str] | None = None) -> int:
    return _number(name, int(default), int, minimum, env)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    return _number(name, float(default), float, minimum, env)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _normalize_click_mode(raw: str) -> str:
    value = str(raw).strip().lower()
    if value in {"replace", "single"}:
        return "exclusive"
    if value not in CLICK_MODES:
        return "toggle"
    return value


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("VIEWKIT_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_list_config(*, env: Mapping[str, str] | None = None) -> ListConfig:
    return ListConfig(
        overscan=_int("VIEWKIT_LIST_OVERSCAN", 3, minimum=0, env=env),
        item_height=_float("VIEWKIT_LIST_ITEM_HEIGHT", 44.0, minimum=1.0, env=env),
        frame_interval_ms=_float("VIEWKIT_FRAME_INTERVAL_MS", 16.0, minimum=0.0, env=env),
        click_mode=_normalize_click_mode(_text("VIEWKIT_SELECTION_CLICK_MODE", "toggle", env=env)),
        log_level=resolve_log_level_name(env=env),
        window_trace_enabled=_flag("VIEWKIT_DEBUG_WINDOW_TRACE", False, env=env),
    )


def load_logging_config(*, env: Mapping[str, str] | None = None) -> LoggingConfig:
    """Logging pipeline settings; window tracing forces its logger to DEBUG."""
    trace = _flag("VIEWKIT_DEBUG_WINDOW_TRACE", False, env=env)
    file_path = _text("VIEWKIT_LOG_FILE", "", env=env)
    return LoggingConfig(
        level_name=resolve_log_level_name(env=env),
        console_format=_log_format(_text("VIEWKIT_LOG_FORMAT", "text", env=env), "text"),
        file_path=file_path or None,
        file_format=_log_format(_text("VIEWKIT_LOG_FILE_FORMAT", "json", env=env), "json"),
        logger_levels=((WINDOW_TRACE_LOGGER, "DEBUG"),) if trace else (),
    )


def _log_format(raw: str, default: str) -> str:
    value = raw.strip().lower()
    return value if value in LOG_FORMATS else default
