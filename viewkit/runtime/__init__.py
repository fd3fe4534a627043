"""Runtime implementations behind the viewkit API ports."""

from viewkit.runtime.config import ListConfig, load_list_config, load_logging_config, resolve_log_level_name
from viewkit.runtime.events import ChangeNotifier
from viewkit.runtime.frames import CoalescedFrameTask, ManualFrameScheduler
from viewkit.runtime.logging import (
    configure_viewkit_logging,
    get_viewkit_logger,
    setup_viewkit_logging,
    shutdown_viewkit_logging,
)
from viewkit.runtime.state import ObservableState, StateChanged

__all__ = [
    "ChangeNotifier",
    "CoalescedFrameTask",
    "ListConfig",
    "ManualFrameScheduler",
    "ObservableState",
    "StateChanged",
    "configure_viewkit_logging",
    "get_viewkit_logger",
    "load_list_config",
    "load_logging_config",
    "resolve_log_level_name",
    "setup_viewkit_logging",
    "shutdown_viewkit_logging",
]
