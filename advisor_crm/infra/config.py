"""Env-file loading for application configuration."""

from __future__ import annotations

import os
from collections.abc import Iterator, MutableMapping, Sequence
from pathlib import Path

DEFAULT_ENV_FILES: tuple[str, ...] = (".env", ".env.local")
_QUOTES = ("'", '"')


def parse_env_line(line: str) -> tuple[str, str] | None:
    """Return the `(key, value)` pair declared on one env-file line, if any."""
    text = line.strip()
    if text.startswith("export "):
        text = text.removeprefix("export ").lstrip()
    if not text or text.startswith("#"):
        return None
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    value = value.strip()
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        value = value[1:-1]
    return key, value


def iter_env_pairs(path: str | Path) -> Iterator[tuple[str, str]]:
    """Yield pairs from an env file in file order; a missing file yields nothing."""
    env_path = Path(path)
    if not env_path.is_file():
        return
    with env_path.open(encoding="utf-8") as handle:
        for line in handle:
            pair = parse_env_line(line)
            if pair is not None:
                yield pair


def load_env_file(
    path: str | Path = ".env",
    *,
    override_existing: bool = True,
    environ: MutableMapping[str, str] | None = None,
) -> int:
    """Apply one env file to `environ` (default: process env); return the count applied."""
    target = os.environ if environ is None else environ
    applied = 0
    for key, value in iter_env_pairs(path):
        if not override_existing and key in target:
            continue
        target[key] = value
        applied += 1
    return applied


def load_default_env_files(
    *,
    override_existing: bool = True,
    paths: Sequence[str | Path] | None = None,
    environ: MutableMapping[str, str] | None = None,
) -> int:
    """Load env files left to right; later files win when overriding."""
    return sum(
        load_env_file(path, override_existing=override_existing, environ=environ)
        for path in (DEFAULT_ENV_FILES if paths is None else paths)
    )
