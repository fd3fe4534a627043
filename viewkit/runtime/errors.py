"""Error policy for releasing toolkit-owned resources."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

# Raised by wrapped toolkit objects whose native side was already deleted.
TEARDOWN_ERRORS: tuple[type[BaseException], ...] = (
    RuntimeError,
    AttributeError,
    TypeError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Log a tolerated exception together with its traceback."""
    logger.log(level, message, exc_info=True)


@contextmanager
def tolerate_teardown(logger: logging.Logger, resource: str) -> Iterator[None]:
    """Release `resource`, logging instead of raising when it is already gone."""
    try:
        yield
    except TEARDOWN_ERRORS:
        log_recoverable(logger, f"{resource} already released")
