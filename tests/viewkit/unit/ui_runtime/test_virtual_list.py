from __future__ import annotations

from viewkit.ui_runtime.virtual_list import VirtualListController, WindowChanged


def _controller(items, container, frames, size_observers, **kwargs) -> VirtualListController[int]:
    return VirtualListController(
        items,
        item_height=10.0,
        container=container,
        frame_scheduler=frames,
        observe_size=size_observers,
        overscan=kwargs.pop("overscan", 2),
        **kwargs,
    )


def test_unmounted_controller_uses_fallback_window(container, frames, size_observers) -> None:
    controller = _controller(list(range(100)), container, frames, size_observers)

    assert controller.window.start_index == 0
    assert controller.window.end_index == 4
    assert size_observers.callback is None


def test_mount_reads_initial_height_synchronously(container, frames, size_observers) -> None:
    controller = _controller(list(range(100)), container, frames, size_observers)

    controller.mount()

    assert controller.is_mounted
    assert controller.viewport.viewport_height == 100.0
    assert controller.window.end_index == 14
    assert frames.pending_count == 0


def test_scroll_events_coalesce_to_one_recompute_per_frame(container, frames, size_observers) -> None:
    controller = _controller(list(range(100)), container, frames, size_observers)
    seen: list[WindowChanged[int]] = []
    controller.subscribe(seen.append)
    controller.mount()
    seen.clear()

    for offset in (30.0, 120.0, 250.0):
        container.offset = offset
        controller.on_scroll()

    assert frames.pending_count == 1
    assert controller.window.start_index == 0

    assert frames.run_frame() == 1
    assert len(seen) == 1
    assert controller.viewport.scroll_offset == 250.0
    assert controller.window.start_index == 23
    assert controller.window.offset_top == 230.0
    assert not controller.scroll_pending


def test_latest_offset_read_when_frame_fires(container, frames, size_observers) -> None:
    controller = _controller(list(range(100)), container, frames, size_observers)
    controller.mount()

    container.offset = 40.0
    controller.on_scroll()
    container.offset = 400.0
    frames.run_frame()

    assert controller.viewport.scroll_offset == 400.0


def test_size_observation_recomputes_immediately(container, frames, size_observers) -> None:
    controller = _controller(list(range(100)), container, frames, size_observers)
    controller.mount()

    size_observers.emit(300.0)

    assert controller.viewport.viewport_height == 300.0
    assert controller.window.end_index == 34


def test_input_changes_recompute(container, frames, size_observers) -> None:
    controller = _controller(list(range(100)), container, frames, size_observers)
    controller.mount()
    seen: list[WindowChanged[int]] = []
    controller.subscribe(seen.append)

    controller.set_items(list(range(5)))
    assert controller.window.visible_items == (0, 1, 2, 3, 4)
    assert controller.window.total_height == 50.0

    controller.set_item_height(20.0)
    assert controller.window.total_height == 100.0

    controller.set_overscan(0)
    controller.set_overscan(0)
    assert len(seen) == 2
    assert controller.window.end_index == 5


def test_unchanged_window_is_not_republished(container, frames, size_observers) -> None:
    controller = _controller(list(range(100)), container, frames, size_observers)
    controller.mount()
    seen: list[WindowChanged[int]] = []
    controller.subscribe(seen.append)

    container.offset = 3.0
    controller.on_scroll()
    frames.run_frame()

    assert controller.viewport.scroll_offset == 3.0
    assert seen == []


def test_unmount_cancels_pending_frame_and_disconnects(container, frames, size_observers) -> None:
    controller = _controller(list(range(100)), container, frames, size_observers)
    controller.mount()
    container.offset = 500.0
    controller.on_scroll()

    controller.unmount()
    controller.unmount()

    assert frames.pending_count == 0
    assert frames.run_frame() == 0
    assert size_observers.disconnects == 1
    assert controller.viewport.scroll_offset == 0.0


def test_callbacks_after_unmount_do_not_update_state(container, frames, size_observers) -> None:
    controller = _controller(list(range(100)), container, frames, size_observers)
    controller.mount()
    controller.unmount()

    size_observers.emit(500.0)
    controller.on_scroll()

    assert controller.viewport.viewport_height == 100.0
    assert frames.pending_count == 0


def test_mounted_context_guarantees_teardown(container, frames, size_observers) -> None:
    controller = _controller(list(range(100)), container, frames, size_observers)

    try:
        with controller.mounted():
            container.offset = 90.0
            controller.on_scroll()
            raise RuntimeError("render failed")
    except RuntimeError:
        pass

    assert not controller.is_mounted
    assert frames.pending_count == 0
    assert size_observers.disconnects == 1


def test_remount_starts_fresh_observer(container, frames, size_observers) -> None:
    controller = _controller(list(range(100)), container, frames, size_observers)
    controller.mount()
    controller.unmount()
    container.height = 200.0

    controller.mount()

    assert len(size_observers.observers) == 2
    assert size_observers.observers[-1].connected
    assert controller.viewport.viewport_height == 200.0
