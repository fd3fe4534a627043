"""Application entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from advisor_crm.core.samples import generate_sample_tasks
from advisor_crm.infra.config import load_default_env_files
from viewkit.runtime.config import load_list_config
from viewkit.runtime.logging import get_viewkit_logger, setup_viewkit_logging, shutdown_viewkit_logging

logger = get_viewkit_logger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="advisor_crm", description="Virtualized advisor task list.")
    parser.add_argument("--tasks", type=int, default=5000, help="number of sample tasks to load")
    parser.add_argument("--seed", type=int, default=7, help="sample data seed")
    parser.add_argument("--table", action="store_true", help="flat table ordering instead of board columns")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the task list window."""
    args = _parse_args(argv)
    load_default_env_files(override_existing=False)
    setup_viewkit_logging()
    config = load_list_config()
    logger.info(
        "list_config overscan=%d item_height=%.1f frame_interval_ms=%.1f click_mode=%s",
        config.overscan,
        config.item_height,
        config.frame_interval_ms,
        config.click_mode,
    )
    from advisor_crm.qt.bootstrap import create_qt_frontend

    frontend = create_qt_frontend(
        generate_sample_tasks(args.tasks, seed=args.seed),
        config,
        table_mode=args.table,
    )
    frontend.window.show()
    try:
        return int(frontend.run_event_loop())
    finally:
        shutdown_viewkit_logging()


if __name__ == "__main__":
    raise SystemExit(main())
