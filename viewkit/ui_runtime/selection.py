"""Toggle and shift-range multi-selection over partitioned ordered lists."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from viewkit.api.events import Subscription
from viewkit.runtime.events import ChangeNotifier
from viewkit.runtime.logging import get_viewkit_logger

logger = get_viewkit_logger(__name__)


class ClickMode(StrEnum):
    """What a plain (unmodified) click does to the selection."""

    TOGGLE = "toggle"
    EXCLUSIVE = "exclusive"


class SelectionState(StrEnum):
    EMPTY = "EMPTY"
    ANCHORED = "ANCHORED"


@dataclass(frozen=True, slots=True)
class SelectionChanged[TId]:
    """Published after every effective selection change."""

    selected_ids: frozenset[TId]
    last_selected_id: TId | None
    revision: int


class _Unset:
    pass


UNSET = _Unset()


class RangeSelection[TItem, TId: Hashable, TPartition]:
    """Selected-id set plus the anchor used for shift-click ranges.

    Ranges only span items that share the anchor's partition; any shift-click
    that cannot form such a range degrades to a toggle of the clicked item.
    Ids of items that later disappear stay selected until cleared.
    """

    def __init__(
        self,
        *,
        id_of: Callable[[TItem], TId],
        partition_of: Callable[[TItem], TPartition],
        items_in_partition: Callable[[TPartition], Sequence[TItem]],
        items: Iterable[TItem] = (),
        click_mode: ClickMode | str = ClickMode.TOGGLE,
    ) -> None:
        for name, accessor in (
            ("id_of", id_of),
            ("partition_of", partition_of),
            ("items_in_partition", items_in_partition),
        ):
            if not callable(accessor):
                raise TypeError(f"{name} must be callable")
        self._id_of = id_of
        self._partition_of = partition_of
        self._items_in_partition = items_in_partition
        self._items: tuple[TItem, ...] = tuple(items)
        self._click_mode = ClickMode(click_mode)
        self._selected: set[TId] = set()
        self._last_selected_id: TId | None = None
        self._revision = 0
        self._changes: ChangeNotifier[SelectionChanged[TId]] = ChangeNotifier()

    @property
    def click_mode(self) -> ClickMode:
        return self._click_mode

    @property
    def selected_ids(self) -> frozenset[TId]:
        return frozenset(self._selected)

    @property
    def selected_count(self) -> int:
        return len(self._selected)

    @property
    def last_selected_id(self) -> TId | None:
        return self._last_selected_id

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def state(self) -> SelectionState:
        if self._selected:
            return SelectionState.ANCHORED
        return SelectionState.EMPTY

    def set_items(self, items: Iterable[TItem]) -> None:
        """Replace the live item collection; selected ids are kept as-is."""
        self._items = tuple(items)

    def is_selected(self, item_id: TId) -> bool:
        return item_id in self._selected

    def selected_items(self, items: Iterable[TItem] | None = None) -> list[TItem]:
        """Return live items whose ids are selected, in collection order."""
        source = self._items if items is None else items
        return [item for item in source if self._id_of(item) in self._selected]

    def select_item(
        self,
        clicked_id: TId,
        shift_held: bool,
        items: Iterable[TItem] | None = None,
        *,
        ctrl_held: bool = False,
    ) -> bool:
        """Apply one click to the selection and return whether it changed."""
        if items is not None:
            self.set_items(items)
        clicked = self._find(clicked_id)
        if clicked is None:
            logger.debug("selection click ignored, unknown id=%r", clicked_id)
            return False

        if shift_held and self._last_selected_id is not None:
            anchor_id = self._last_selected_id
            anchor = self._find(anchor_id)
            partition = self._partition_of(clicked)
            if anchor is not None and self._partition_of(anchor) == partition:
                span = self._span_ids(partition, anchor_id, clicked_id)
                if span is None:
                    logger.debug("shift range unresolved anchor=%r clicked=%r", anchor_id, clicked_id)
                    return False
                return self._commit(self._selected | set(span), clicked_id)
            logger.debug("shift range fallback to toggle anchor=%r clicked=%r", anchor_id, clicked_id)
            return self._commit(self._toggled(clicked_id), clicked_id)

        if self._click_mode is ClickMode.EXCLUSIVE and not ctrl_held:
            return self._commit({clicked_id}, clicked_id)
        return self._commit(self._toggled(clicked_id), clicked_id)

    def set_checked(
        self,
        item_id: TId,
        checked: bool,
        shift_held: bool = False,
        items: Iterable[TItem] | None = None,
    ) -> bool:
        """Checkbox variant: shift extends a range, otherwise add or remove explicitly."""
        if items is not None:
            self.set_items(items)
        clicked = self._find(item_id)
        if clicked is None:
            return False
        if shift_held and self._last_selected_id is not None:
            anchor = self._find(self._last_selected_id)
            partition = self._partition_of(clicked)
            if anchor is not None and self._partition_of(anchor) == partition:
                span = self._span_ids(partition, self._last_selected_id, item_id)
                if span is not None:
                    return self._commit(self._selected | set(span), item_id)
        updated = set(self._selected)
        if checked:
            updated.add(item_id)
        else:
            updated.discard(item_id)
        return self._commit(updated, item_id)

    def clear_selection(self) -> bool:
        return self._commit(set(), None)

    def select_all(self, items: Iterable[TItem] | None = None) -> bool:
        """Select every item of `items` (default: live collection) and drop the anchor."""
        source = self._items if items is None else tuple(items)
        return self._commit({self._id_of(item) for item in source}, None)

    def toggle_select_all(self, items: Iterable[TItem] | None = None) -> bool:
        """Clear when all of `items` are selected, otherwise select all of them."""
        source = self._items if items is None else tuple(items)
        ids = {self._id_of(item) for item in source}
        if ids and ids <= self._selected:
            return self._commit(set(), None)
        return self._commit(ids, None)

    def apply_selection(self, ids: Iterable[TId], last_id: TId | None | _Unset = UNSET) -> bool:
        """Replace selected ids; the anchor only moves when `last_id` is given."""
        anchor = self._last_selected_id if isinstance(last_id, _Unset) else last_id
        return self._commit(set(ids), anchor)

    def subscribe(self, handler: Callable[[SelectionChanged[TId]], None]) -> Subscription:
        return self._changes.subscribe(handler)

    def unsubscribe(self, subscription: Subscription) -> None:
        self._changes.unsubscribe(subscription)

    def _find(self, item_id: TId) -> TItem | None:
        for item in self._items:
            if self._id_of(item) == item_id:
                return item
        return None

    def _span_ids(self, partition: TPartition, first_id: TId, second_id: TId) -> list[TId] | None:
        ordered_ids = [self._id_of(item) for item in self._items_in_partition(partition)]
        try:
            first = ordered_ids.index(first_id)
            second = ordered_ids.index(second_id)
        except ValueError:
            return None
        low, high = min(first, second), max(first, second)
        return ordered_ids[low : high + 1]

    def _toggled(self, item_id: TId) -> set[TId]:
        updated = set(self._selected)
        if item_id in updated:
            updated.remove(item_id)
        else:
            updated.add(item_id)
        return updated

    def _commit(self, selected: set[TId], anchor: TId | None) -> bool:
        if selected == self._selected and anchor == self._last_selected_id:
            return False
        self._selected = selected
        self._last_selected_id = anchor
        self._revision += 1
        self._changes.notify(
            SelectionChanged(
                selected_ids=frozenset(selected),
                last_selected_id=anchor,
                revision=self._revision,
            )
        )
        return True
